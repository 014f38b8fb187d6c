"""Orbital model and transfer calculations."""

from orbits.astro.bodies import G, CelestialBody, Orbit
from orbits.astro.hohmann import (
    HohmannTransferCalculator,
    TransferResult,
    compute_transfer,
    find_common_primary,
)

__all__ = [
    "G",
    "CelestialBody",
    "Orbit",
    "compute_transfer",
    "find_common_primary",
    "HohmannTransferCalculator",
    "TransferResult",
]
