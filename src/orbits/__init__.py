"""
Orbits - Hohmann transfer calculator

Computes the minimum-energy two-burn transfer between circular orbits
sharing a gravitational primary, including interplanetary transfers
between parking orbits around different planets.
"""

__version__ = "0.1.0"

from orbits.astro import (
    CelestialBody,
    HohmannTransferCalculator,
    Orbit,
    TransferResult,
    compute_transfer,
)
from orbits.exceptions import (
    IncompatibleOrbits,
    InvalidParameter,
    NotConfigured,
    NullPrimaryBody,
    OrbitsError,
)

__all__ = [
    "CelestialBody",
    "Orbit",
    "compute_transfer",
    "HohmannTransferCalculator",
    "TransferResult",
    "OrbitsError",
    "InvalidParameter",
    "NullPrimaryBody",
    "NotConfigured",
    "IncompatibleOrbits",
    "__version__",
]
