from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Worker:
    """A volunteer on the rota.

    ``ical_url`` is private: ``to_public`` never exposes it.
    """

    worker_id: int
    display_name: str
    ical_url: str
    created_at: datetime

    def to_public(self) -> dict:
        return {
            "id": self.worker_id,
            "display_name": self.display_name,
            "created_at": self.created_at.isoformat(),
        }
