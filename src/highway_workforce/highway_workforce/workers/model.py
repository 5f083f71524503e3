from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import WorkerStatus


@dataclass(frozen=True)
class Worker:
    """Domain entity: a construction site worker.

    ``id_card`` (national ID) is the natural unique key.
    """

    name: str
    id_card: str
    gender: Optional[str] = None
    age: Optional[int] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    hire_date: Optional[date] = None
    status: WorkerStatus = WorkerStatus.ACTIVE
    address: Optional[str] = None
    remarks: Optional[str] = None
    id: Optional[int] = None
