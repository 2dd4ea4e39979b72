"""
Unit tests for PostgresRezervationRepository using a mocked SQLAlchemy session.

Verifies:
- Row <-> domain conversion (car type enum, Decimal fees, version)
- Optimistic update reports a lost race when no row is affected
- Paging is pushed to SQL only when there is no predicate
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.orm import Session

from car_rental.adapters.postgres_rezervation_repository import PostgresRezervationRepository
from car_rental.domain.car_type import CarTypeVariant
from car_rental.infra.db.models.rezervation import RezervationRow


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


def _row(row_id: int, client_id: int = 1, **overrides) -> RezervationRow:
    values = dict(
        id=row_id,
        client_id=client_id,
        car_plate_number="CA1234AC",
        car_type="family",
        pick_up_date=datetime(2026, 1, 2, tzinfo=timezone.utc),
        return_date=datetime(2026, 1, 6, tzinfo=timezone.utc),
        rental_fee=Decimal("2304.000000"),
        deposit_fee=Decimal("345.600000"),
        cancellation_fee_rate=None,
        cancellation_fee=None,
        is_picked_up=False,
        is_returned=False,
        is_cancelled=False,
        version=3,
    )
    values.update(overrides)
    return RezervationRow(**values)


def _select_returning(mock_session: Mock, rows: list[RezervationRow]) -> None:
    result = Mock()
    result.scalars.return_value.all.return_value = rows
    mock_session.execute.return_value = result


def test_get_by_id_converts_row_to_domain(mock_session: Mock) -> None:
    mock_session.get.return_value = _row(7)
    repo = PostgresRezervationRepository(mock_session)

    rezervation = repo.get_by_id(7)

    assert rezervation is not None
    assert rezervation.rezervation_id == 7
    assert rezervation.car_type is CarTypeVariant.FAMILY
    assert rezervation.rental_fee == Decimal("2304.00")
    assert rezervation.version == 3
    mock_session.get.assert_called_once_with(RezervationRow, 7)


def test_get_by_id_missing_returns_none(mock_session: Mock) -> None:
    mock_session.get.return_value = None

    assert PostgresRezervationRepository(mock_session).get_by_id(7) is None


def test_update_returns_bumped_version_when_row_matched(mock_session: Mock) -> None:
    mock_session.execute.return_value = Mock(rowcount=1)
    repo = PostgresRezervationRepository(mock_session)
    mock_session.get.return_value = _row(7)
    current = repo.get_by_id(7)

    stored = repo.update(current)

    assert stored is not None
    assert stored.version == 4
    mock_session.execute.assert_called_once()


def test_update_returns_none_when_version_moved_on(mock_session: Mock) -> None:
    mock_session.execute.return_value = Mock(rowcount=0)
    mock_session.get.return_value = _row(7)
    repo = PostgresRezervationRepository(mock_session)

    assert repo.update(repo.get_by_id(7)) is None


def test_search_without_predicate_returns_all_rows(mock_session: Mock) -> None:
    _select_returning(mock_session, [_row(1), _row(2)])
    repo = PostgresRezervationRepository(mock_session)

    result = repo.search(offset=0, limit=2)

    assert [r.rezervation_id for r in result] == [1, 2]
    mock_session.execute.assert_called_once()


def test_search_with_predicate_filters_then_pages_in_python(mock_session: Mock) -> None:
    _select_returning(
        mock_session, [_row(1, client_id=1), _row(2, client_id=2), _row(3, client_id=2)]
    )
    repo = PostgresRezervationRepository(mock_session)

    result = repo.search(lambda r: r.client_id == 2, offset=1, limit=1)

    assert [r.rezervation_id for r in result] == [3]
