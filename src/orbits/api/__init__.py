"""HTTP interface for the transfer calculator."""

from orbits.api.app import create_app
from orbits.api.schemas import (
    InterplanetaryTransferRequest,
    SimpleTransferRequest,
    TransferResponse,
)

__all__ = [
    "create_app",
    "SimpleTransferRequest",
    "InterplanetaryTransferRequest",
    "TransferResponse",
]
