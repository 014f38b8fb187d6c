"""
Celestial bodies and the circular orbits around them.

Bodies and orbits form an upward chain: an :class:`Orbit` points at the
body it circles, and that body may itself follow an orbit around a larger
primary (moon -> planet -> star).  The chain is built by the caller,
bottom-up, and is never owned by either side.  All units are SI
(m, kg, s).
"""

from __future__ import annotations

import math
from typing import Iterator, Optional, Tuple

import numpy as np

from orbits.exceptions import IncompatibleOrbits, InvalidParameter, NullPrimaryBody

# Newton's gravitational constant (m^3 kg^-1 s^-2)
G = 6.674e-11


def _require_positive(value: float, what: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{what} must be a number, got {value!r}") from None
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameter(f"{what} must be greater than 0, got {value!r}")
    return value


class CelestialBody:
    """A massive body, optionally in orbit around a larger one.

    Parameters
    ----------
    name : str, optional
        Display name, used only in diagnostics.
    mass : float
        Mass in kilograms, must be greater than 0.
    orbit : Orbit, optional
        The orbit this body follows.  Usually assigned after construction,
        once the orbit around the larger primary has been built.

    Bodies compare by identity: two bodies with the same name and mass
    are still different bodies.
    """

    def __init__(self, name: Optional[str] = None, mass: Optional[float] = None, orbit: Optional[Orbit] = None):
        self.name = name
        self.mass = _require_positive(mass, "Body mass")
        if G * self.mass == 0.0:
            raise InvalidParameter(f"Body mass {self.mass!r} is too small to attract anything")
        self.orbit = orbit

    def standard_gravitational_parameter(self) -> float:
        """Return mu = G * mass (m^3/s^2)."""
        return G * self.mass

    def __repr__(self) -> str:
        label = self.name if self.name is not None else f"<unnamed at {id(self):#x}>"
        return f"CelestialBody({label}, mass={self.mass:.4e})"


class Orbit:
    """A circular orbit of a given radius around a primary body.

    Parameters
    ----------
    radius : float
        Orbit radius in meters, must be greater than 0.
    primary_body : CelestialBody
        The body being orbited.  Not owned; several orbits may share it.

    Orbits are immutable once built.
    """

    __slots__ = ("_radius", "_primary_body")

    def __init__(self, radius: float, primary_body: CelestialBody):
        radius = _require_positive(radius, "Orbit radius")
        if primary_body is None:
            raise NullPrimaryBody("Orbit requires a primary body")
        object.__setattr__(self, "_radius", radius)
        object.__setattr__(self, "_primary_body", primary_body)

    def __setattr__(self, name, value):
        raise AttributeError(f"Orbit is immutable, cannot set {name!r}")

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def primary_body(self) -> CelestialBody:
        return self._primary_body

    def standard_gravitational_parameter(self) -> float:
        """Return the gravitational parameter of the primary body."""
        return self._primary_body.standard_gravitational_parameter()

    def orbital_speed(self) -> float:
        """Return the circular orbital speed sqrt(mu / r) in m/s."""
        return float(np.sqrt(self.standard_gravitational_parameter() / self._radius))

    def period(self) -> float:
        """Return the circular orbital period in seconds."""
        r = self._radius
        return float(2.0 * np.pi * r * np.sqrt(r / self.standard_gravitational_parameter()))

    def ancestry(self) -> Iterator[Tuple[Orbit, CelestialBody]]:
        """Walk the chain upward, yielding ``(orbit, primary_body)`` pairs.

        Starts with this orbit and its primary, continues with the primary's
        own orbit, and stops at the first body that has no orbit.

        Raises
        ------
        IncompatibleOrbits
            If the chain loops back onto a body already visited.
        """
        seen = set()
        orbit: Optional[Orbit] = self
        while orbit is not None:
            body = orbit.primary_body
            if id(body) in seen:
                raise IncompatibleOrbits(f"Orbit chain loops back onto {body!r}")
            seen.add(id(body))
            yield orbit, body
            orbit = body.orbit

    def __repr__(self) -> str:
        return f"Orbit(radius={self._radius:.4e}, primary_body={self._primary_body!r})"
