from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    def list_all(self) -> Sequence[Worker]:
        """All workers, oldest first."""

        raise NotImplementedError

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def create(self, *, display_name: str, ical_url: str) -> Worker:
        raise NotImplementedError
