"""
Analytical Hohmann transfer between two circular orbits.

The transfer ellipse is always conceived around the primary that both
orbits ultimately share.  When the orbits circle that primary directly
the classic two-burn formulas apply; when one (or both) of them circles
an intermediate body, e.g. a parking orbit around a planet that itself
orbits the star, the planet's orbit stands in for it and the burn is
patched onto the parking orbit through the hyperbolic excess speed.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
from astropy import units as u
from pydantic import BaseModel, ConfigDict, Field

from orbits.astro.bodies import CelestialBody, Orbit
from orbits.exceptions import IncompatibleOrbits, InvalidParameter, NotConfigured

logger = logging.getLogger(__name__)


class TransferResult(BaseModel):
    """Structured result of a Hohmann transfer calculation (SI units)."""

    model_config = ConfigDict(frozen=True)

    transfer_time: float = Field(..., description="Half period of the transfer ellipse (s)")
    insertion_delta_v: float = Field(..., description="Burn leaving the starting orbit (m/s)")
    arrival_delta_v: float = Field(..., description="Burn entering the destination orbit (m/s)")
    total_delta_v: float = Field(..., description="Insertion plus arrival delta-v (m/s)")
    semi_major_axis: float = Field(..., description="Transfer ellipse semi-major axis (m)")
    central_body_mu: float = Field(..., description="Gravitational parameter of the shared primary (m^3/s^2)")

    @property
    def transfer_time_days(self) -> float:
        return (self.transfer_time * u.s).to(u.day).value


def find_common_primary(
    starting_orbit: Orbit, destination_orbit: Orbit
) -> Tuple[CelestialBody, Orbit, Orbit]:
    """Find the body both orbits ultimately circle.

    Returns
    -------
    tuple
        ``(primary, starting_leg, destination_leg)`` where each leg is the
        orbit on that side that circles ``primary`` directly.  For two
        orbits around the same body the legs are the orbits themselves.

    Raises
    ------
    IncompatibleOrbits
        If the upward chains never meet.
    """
    if starting_orbit.primary_body is destination_orbit.primary_body:
        return starting_orbit.primary_body, starting_orbit, destination_orbit

    destination_legs = {id(body): orbit for orbit, body in destination_orbit.ancestry()}
    for orbit, body in starting_orbit.ancestry():
        if id(body) in destination_legs:
            return body, orbit, destination_legs[id(body)]

    raise IncompatibleOrbits(
        f"Orbits around {starting_orbit.primary_body!r} and "
        f"{destination_orbit.primary_body!r} share no common primary"
    )


def _patched_burn(parking_orbit: Orbit, v_inf: float) -> float:
    """Burn from a circular parking orbit onto a hyperbola with excess ``v_inf``."""
    mu = parking_orbit.standard_gravitational_parameter()
    r = parking_orbit.radius
    return float(np.sqrt(v_inf * v_inf + 2.0 * mu / r) - np.sqrt(mu / r))


def compute_transfer(
    starting_orbit: Optional[Orbit], destination_orbit: Optional[Orbit]
) -> TransferResult:
    """Compute the Hohmann transfer between two circular orbits.

    Parameters
    ----------
    starting_orbit, destination_orbit : Orbit
        Orbits sharing a gravitational primary, directly or through the
        orbits of their primaries.

    Returns
    -------
    TransferResult
        Transfer time and the delta-v breakdown.

    Raises
    ------
    NotConfigured
        If either orbit is missing.
    IncompatibleOrbits
        If the orbits share no primary.
    InvalidParameter
        If the results fall outside the floating point range.

    Examples
    --------
    >>> sun = CelestialBody("Sol", 1.989e30)
    >>> result = compute_transfer(Orbit(1.496e11, sun), Orbit(2.289e11, sun))
    >>> 5640 < result.total_delta_v < 5645
    True
    """
    if starting_orbit is None or destination_orbit is None:
        raise NotConfigured("Orbit data required for calculation has not been set")

    primary, starting_leg, destination_leg = find_common_primary(starting_orbit, destination_orbit)
    mu = primary.standard_gravitational_parameter()
    logger.debug("Transfer around %r from %r to %r", primary, starting_leg, destination_leg)

    r1 = starting_leg.radius
    r2 = destination_leg.radius
    a_t = 0.5 * r1 + 0.5 * r2

    with np.errstate(over="ignore", invalid="ignore"):
        # Circular velocities around the shared primary
        v1 = np.sqrt(mu / r1)
        v2 = np.sqrt(mu / r2)

        dv1 = float(v1 * abs(1.0 - np.sqrt(r2 / a_t)))
        dv2 = float(v2 * abs(1.0 - np.sqrt(r1 / a_t)))

        # Escape and capture from parking orbits around intermediate bodies
        if starting_leg is not starting_orbit:
            dv1 = _patched_burn(starting_orbit, dv1)
        if destination_leg is not destination_orbit:
            dv2 = _patched_burn(destination_orbit, dv2)

        # Half period of the transfer ellipse, pi * sqrt(a^3 / mu) without cubing
        T_transfer = float(np.pi * a_t * np.sqrt(a_t / mu))

    if not np.all(np.isfinite([T_transfer, dv1, dv2, dv1 + dv2])):
        raise InvalidParameter(
            f"Transfer from r={r1:.4e} to r={r2:.4e} m around {primary!r} is out of numeric range"
        )

    result = TransferResult(
        transfer_time=T_transfer,
        insertion_delta_v=dv1,
        arrival_delta_v=dv2,
        total_delta_v=dv1 + dv2,
        semi_major_axis=float(a_t),
        central_body_mu=mu,
    )
    logger.debug("Computed %s", result)
    return result


class HohmannTransferCalculator:
    """Stateful wrapper around :func:`compute_transfer`.

    Holds a starting and a destination orbit and the most recent result.
    Results are replaced only by a successful :meth:`calculate` and are
    unavailable before the first one.  Use one instance per computation;
    instances must not be shared between threads.

    Parameters
    ----------
    starting_orbit, destination_orbit : Orbit, optional
        Initial inputs; either may be set later.
    """

    def __init__(self, starting_orbit: Optional[Orbit] = None, destination_orbit: Optional[Orbit] = None):
        self.starting_orbit = starting_orbit
        self.destination_orbit = destination_orbit
        self._result: Optional[TransferResult] = None

    def set_starting_orbit(self, orbit: Optional[Orbit]) -> None:
        self.starting_orbit = orbit

    def set_destination_orbit(self, orbit: Optional[Orbit]) -> None:
        self.destination_orbit = orbit

    def calculate(self) -> TransferResult:
        """Compute the transfer for the current orbits and keep the result."""
        self._result = compute_transfer(self.starting_orbit, self.destination_orbit)
        return self._result

    @property
    def result(self) -> TransferResult:
        if self._result is None:
            raise NotConfigured("No transfer has been calculated yet")
        return self._result

    @property
    def transfer_time(self) -> float:
        return self.result.transfer_time

    @property
    def insertion_delta_v(self) -> float:
        return self.result.insertion_delta_v

    @property
    def arrival_delta_v(self) -> float:
        return self.result.arrival_delta_v

    @property
    def total_delta_v(self) -> float:
        return self.result.total_delta_v
