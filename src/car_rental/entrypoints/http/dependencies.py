"""
Dependency injection for FastAPI routes.

Database sessions are per-request; both services of a request share the
same session, so a booking that creates a client on the fly commits or
rolls back as one unit.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from car_rental.adapters.postgres_client_account_repository import (
    PostgresClientAccountRepository,
)
from car_rental.adapters.postgres_rezervation_repository import PostgresRezervationRepository
from car_rental.infra.db.session import get_session
from car_rental.use_cases.client_accounts import ClientAccountService
from car_rental.use_cases.rezervations import RezervationService


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    Commit on success, rollback on any exception raised by the route.
    """
    with get_session() as session:
        yield session


def get_client_account_service(db: Session = Depends(get_db)) -> ClientAccountService:
    return ClientAccountService(
        client_account_repository=PostgresClientAccountRepository(session=db),
        rezervation_repository=PostgresRezervationRepository(session=db),
    )


def get_rezervation_service(
    db: Session = Depends(get_db),
    client_account_service: ClientAccountService = Depends(get_client_account_service),
) -> RezervationService:
    return RezervationService(
        rezervation_repository=PostgresRezervationRepository(session=db),
        client_account_service=client_account_service,
    )
