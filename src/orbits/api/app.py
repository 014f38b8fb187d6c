"""
FastAPI application exposing the Hohmann transfer calculator.

Provides REST API endpoints for:
- Transfers between two orbits around one primary body (``/simple``)
- Transfers between parking orbits around two planets (``/interplanetary``)

All input and output values are in base SI units.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from orbits import __version__
from orbits.api.schemas import (
    ErrorResponse,
    InterplanetaryTransferRequest,
    SimpleTransferRequest,
    TransferResponse,
)
from orbits.astro.hohmann import compute_transfer
from orbits.config import ServiceConfig
from orbits.exceptions import (
    IncompatibleOrbits,
    InvalidParameter,
    NotConfigured,
    NullPrimaryBody,
    OrbitsError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidParameter: 422,
    NullPrimaryBody: 422,
    IncompatibleOrbits: 400,
    NotConfigured: 400,
}


async def _orbits_error_handler(request: Request, exc: OrbitsError) -> JSONResponse:
    status = ERROR_STATUS.get(type(exc), 400)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(detail=str(exc), error=type(exc).__name__)
    return JSONResponse(status_code=status, content=body.model_dump())


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    """Build the API application."""
    config = config or ServiceConfig()
    app = FastAPI(
        title=config.title,
        description="Hohmann transfer parameters between circular orbits",
        version=__version__,
    )
    app.add_exception_handler(OrbitsError, _orbits_error_handler)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": __version__}

    @app.post("/simple", response_model=TransferResponse)
    def simple_transfer(request: SimpleTransferRequest) -> TransferResponse:
        """Transfer between two orbits around a single primary body."""
        starting_orbit, destination_orbit = request.build_orbits()
        result = compute_transfer(starting_orbit, destination_orbit)
        return TransferResponse.from_result(result)

    @app.post("/interplanetary", response_model=TransferResponse)
    def interplanetary_transfer(request: InterplanetaryTransferRequest) -> TransferResponse:
        """Transfer between orbits around two planets circling the primary body."""
        starting_orbit, destination_orbit = request.build_orbits()
        result = compute_transfer(starting_orbit, destination_orbit)
        return TransferResponse.from_result(result)

    return app


app = create_app()
