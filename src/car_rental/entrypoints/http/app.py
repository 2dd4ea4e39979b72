from fastapi import FastAPI

from car_rental.entrypoints.http.exception_handlers import register_exception_handlers
from car_rental.entrypoints.http.routes.client_accounts import router as client_accounts_router
from car_rental.entrypoints.http.routes.health import router as health_router
from car_rental.entrypoints.http.routes.rezervations import router as rezervations_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Rental API",
        description="""
        Car rental reservations: booking, pick-up, return, cancellation and
        client fee balances.

        ## Lifecycle
        booked -> picked_up -> returned, or booked -> cancelled.

        ## Monetary Values
        All fees are decimal strings (e.g., "2304.00").

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(client_accounts_router, prefix="/v1")
    app.include_router(rezervations_router, prefix="/v1")

    return app


app = build_app()
