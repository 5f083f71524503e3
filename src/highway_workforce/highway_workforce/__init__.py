"""Highway Workforce package.

Feature modules (workers, attendance, schedules, weather, safety, projects)
each carry a model, a repository protocol with its JSON-file implementation,
a service and a thin Flask controller.
"""
