"""PostgreSQL implementation of RezervationRepository."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from car_rental.domain.car_type import CarTypeVariant
from car_rental.domain.rezervation import Rezervation
from car_rental.infra.db.models.rezervation import RezervationRow
from car_rental.ports.rezervation_repository import RezervationPredicate, RezervationRepository


class PostgresRezervationRepository(RezervationRepository):
    """
    PostgreSQL implementation of RezervationRepository.

    - Updates are ``UPDATE ... WHERE id = :id AND version = :version``;
      zero affected rows means a concurrent writer won
    - Predicates are evaluated in Python over rows read in id order;
      without a predicate, OFFSET/LIMIT are pushed down to SQL
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, rezervation_id: int) -> Rezervation | None:
        row = self._session.get(RezervationRow, rezervation_id)
        return self._to_domain(row) if row else None

    def add(self, rezervation: Rezervation) -> Rezervation:
        row = RezervationRow(
            client_id=rezervation.client_id,
            car_plate_number=rezervation.car_plate_number,
            car_type=rezervation.car_type.value,
            pick_up_date=rezervation.pick_up_date,
            return_date=rezervation.return_date,
            rental_fee=rezervation.rental_fee,
            deposit_fee=rezervation.deposit_fee,
            cancellation_fee_rate=rezervation.cancellation_fee_rate,
            cancellation_fee=rezervation.cancellation_fee,
            is_picked_up=rezervation.is_picked_up,
            is_returned=rezervation.is_returned,
            is_cancelled=rezervation.is_cancelled,
            version=1,
        )
        self._session.add(row)
        self._session.flush()  # assigns row.id
        return self._to_domain(row)

    def update(self, rezervation: Rezervation) -> Rezervation | None:
        statement = (
            update(RezervationRow)
            .where(
                RezervationRow.id == rezervation.rezervation_id,
                RezervationRow.version == rezervation.version,
            )
            .values(
                cancellation_fee_rate=rezervation.cancellation_fee_rate,
                cancellation_fee=rezervation.cancellation_fee,
                is_picked_up=rezervation.is_picked_up,
                is_returned=rezervation.is_returned,
                is_cancelled=rezervation.is_cancelled,
                version=rezervation.version + 1,
            )
        )
        result = self._session.execute(statement)
        if result.rowcount != 1:
            return None

        return replace(rezervation, version=rezervation.version + 1)

    def search(
        self,
        predicate: RezervationPredicate | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Rezervation]:
        query = select(RezervationRow).order_by(RezervationRow.id)

        if predicate is None:
            query = query.offset(offset)
            if limit is not None:
                query = query.limit(limit)
            rows = self._session.execute(query).scalars().all()
            return [self._to_domain(row) for row in rows]

        rows = self._session.execute(query).scalars().all()
        matches = [r for r in map(self._to_domain, rows) if predicate(r)]
        end = None if limit is None else offset + limit
        return matches[offset:end]

    def _to_domain(self, row: RezervationRow) -> Rezervation:
        return Rezervation(
            rezervation_id=row.id,
            client_id=row.client_id,
            car_plate_number=row.car_plate_number,
            car_type=CarTypeVariant(row.car_type),
            pick_up_date=row.pick_up_date,
            return_date=row.return_date,
            rental_fee=row.rental_fee,  # Already Decimal from NUMERIC column
            deposit_fee=row.deposit_fee,
            cancellation_fee_rate=row.cancellation_fee_rate,
            cancellation_fee=row.cancellation_fee,
            is_picked_up=row.is_picked_up,
            is_returned=row.is_returned,
            is_cancelled=row.is_cancelled,
            version=row.version,
        )
