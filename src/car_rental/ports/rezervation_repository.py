from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from car_rental.domain.rezervation import Rezervation

RezervationPredicate = Callable[[Rezervation], bool]


class RezervationRepository(ABC):
    """
    Port for rezervation storage.

    Filtering is expressed as plain Python predicates; implementations are
    not expected to translate them into a query language.

    Contract (Preconditions):
        - Inputs are validated by the calling service
        - offset >= 0 and limit > 0 (or None for no cap)
    """

    @abstractmethod
    def get_by_id(self, rezervation_id: int) -> Rezervation | None: ...

    @abstractmethod
    def add(self, rezervation: Rezervation) -> Rezervation:
        """Persist a new rezervation and return it with its assigned id."""
        ...

    @abstractmethod
    def update(self, rezervation: Rezervation) -> Rezervation | None:
        """
        Optimistic-concurrency write.

        Applies only when the stored version equals ``rezervation.version``;
        the stored copy then gets ``version + 1`` and is returned. Returns
        None when the record is missing or was modified in between.
        """
        ...

    @abstractmethod
    def search(
        self,
        predicate: RezervationPredicate | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Rezervation]:
        """
        Return matching rezervations ordered by rezervation_id ascending.

        Paging is applied AFTER filtering: skip ``offset`` matches, then take
        at most ``limit``.
        """
        ...
