"""Request and response models for the transfer API (SI units, camelCase JSON)."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from orbits.astro.bodies import CelestialBody, Orbit
from orbits.astro.hohmann import TransferResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SimpleTransferRequest(_CamelModel):
    """Two orbits around one primary body."""

    primary_body_mass: float = Field(..., description="Mass of the shared primary (kg)")
    starting_orbit_radius: float = Field(..., description="Starting orbit radius (m)")
    destination_orbit_radius: float = Field(..., description="Destination orbit radius (m)")

    def build_orbits(self) -> Tuple[Orbit, Orbit]:
        primary = CelestialBody(None, self.primary_body_mass)
        return (
            Orbit(self.starting_orbit_radius, primary),
            Orbit(self.destination_orbit_radius, primary),
        )


class InterplanetaryTransferRequest(SimpleTransferRequest):
    """Orbits around two planets that both circle the primary body."""

    starting_planet_orbit_radius: float = Field(..., description="Starting planet's orbit radius (m)")
    starting_planet_mass: float = Field(..., description="Starting planet mass (kg)")
    destination_planet_orbit_radius: float = Field(..., description="Destination planet's orbit radius (m)")
    destination_planet_mass: float = Field(..., description="Destination planet mass (kg)")

    def build_orbits(self) -> Tuple[Orbit, Orbit]:
        primary = CelestialBody(None, self.primary_body_mass)
        starting_planet = CelestialBody(None, self.starting_planet_mass)
        starting_planet.orbit = Orbit(self.starting_planet_orbit_radius, primary)
        destination_planet = CelestialBody(None, self.destination_planet_mass)
        destination_planet.orbit = Orbit(self.destination_planet_orbit_radius, primary)
        return (
            Orbit(self.starting_orbit_radius, starting_planet),
            Orbit(self.destination_orbit_radius, destination_planet),
        )


class TransferResponse(_CamelModel):
    """Calculated transfer parameters."""

    transfer_time: float = Field(..., description="Transfer duration (s)")
    insertion_delta_v: float = Field(..., description="Delta-v to enter the transfer orbit (m/s)")
    arrival_delta_v: float = Field(..., description="Delta-v to leave the transfer orbit (m/s)")
    total_delta_v: float = Field(..., description="Total delta-v (m/s)")

    @classmethod
    def from_result(cls, result: TransferResult) -> "TransferResponse":
        return cls(
            transfer_time=result.transfer_time,
            insertion_delta_v=result.insertion_delta_v,
            arrival_delta_v=result.arrival_delta_v,
            total_delta_v=result.total_delta_v,
        )


class ErrorResponse(BaseModel):
    detail: str
    error: str
