from __future__ import annotations

from dataclasses import replace
from itertools import count
from threading import Lock

from car_rental.domain.rezervation import Rezervation
from car_rental.ports.rezervation_repository import RezervationPredicate, RezervationRepository


class InMemoryRezervationRepository(RezervationRepository):
    """
    Canonical contract implementation for tests.

    - Assigns sequential ids starting at 1
    - Version-checked updates under a single lock
    - Applies paging AFTER filtering, in id order
    """

    def __init__(self, rezervations: list[Rezervation] | None = None) -> None:
        self._lock = Lock()
        self._rezervations: dict[int, Rezervation] = {}
        for rezervation in rezervations or []:
            if rezervation.rezervation_id is None:
                raise ValueError("Seeded rezervations must carry a rezervation_id")
            self._rezervations[rezervation.rezervation_id] = rezervation
        self._ids = count(max(self._rezervations, default=0) + 1)

    def get_by_id(self, rezervation_id: int) -> Rezervation | None:
        return self._rezervations.get(rezervation_id)

    def add(self, rezervation: Rezervation) -> Rezervation:
        with self._lock:
            stored = replace(rezervation, rezervation_id=next(self._ids), version=1)
            self._rezervations[stored.rezervation_id] = stored
            return stored

    def update(self, rezervation: Rezervation) -> Rezervation | None:
        with self._lock:
            current = self._rezervations.get(rezervation.rezervation_id)
            if current is None or current.version != rezervation.version:
                return None
            stored = replace(rezervation, version=rezervation.version + 1)
            self._rezervations[stored.rezervation_id] = stored
            return stored

    def search(
        self,
        predicate: RezervationPredicate | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Rezervation]:
        # Trust that the service has validated paging (contract programming)
        with self._lock:
            snapshot = sorted(self._rezervations.values(), key=lambda r: r.rezervation_id)

        matches = [r for r in snapshot if predicate is None or predicate(r)]

        end = None if limit is None else offset + limit
        return matches[offset:end]
