from car_rental.infra.db.models.client_account import ClientAccountRow
from car_rental.infra.db.models.rezervation import RezervationRow

__all__ = ["ClientAccountRow", "RezervationRow"]
