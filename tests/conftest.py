from __future__ import annotations

import random
from datetime import datetime

import pytest

from src.highway_workforce.highway_workforce.container import build_container
from src.highway_workforce.highway_workforce.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 5, 12, 8, 0, 0)


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def container(data_dir):
    return build_container(data_dir=data_dir, weather_random_seed=42)


@pytest.fixture
def worker(container):
    return container.worker_service.create({"name": "Tran Van Hai", "id_card": "110101199001010011", "position": "paver"})


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def app(data_dir):
    app = create_app(
        {
            "TESTING": True,
            "DATA_DIR": str(data_dir),
            "WEATHER_RANDOM_SEED": 42,
            "AUTO_SEED_DATA": False,
            "LOG_LEVEL": "WARNING",
            "LOG_FILE": None,
        }
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()
