"""Tests for the HTTP interface."""

import pytest

SIMPLE_PAYLOAD = {
    "primaryBodyMass": 1.989e30,
    "startingOrbitRadius": 1.496e11,
    "destinationOrbitRadius": 2.289e11,
}

INTERPLANETARY_PAYLOAD = {
    "primaryBodyMass": 1.989e30,
    "startingOrbitRadius": 6.671e6,
    "destinationOrbitRadius": 3.69e6,
    "startingPlanetOrbitRadius": 1.496e11,
    "startingPlanetMass": 5.972e24,
    "destinationPlanetOrbitRadius": 2.289e11,
    "destinationPlanetMass": 6.417e23,
}

RESPONSE_KEYS = {"transferTime", "insertionDeltaV", "arrivalDeltaV", "totalDeltaV"}


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from orbits.api.app import create_app
    return TestClient(create_app())


class TestSimpleEndpoint:
    """Tests for POST /simple."""

    def test_response_shape(self, client):
        response = client.post("/simple", json=SIMPLE_PAYLOAD)
        assert response.status_code == 200
        assert set(response.json()) == RESPONSE_KEYS

    def test_values(self, client):
        data = client.post("/simple", json=SIMPLE_PAYLOAD).json()
        assert data["transferTime"] == pytest.approx(259.9 * 86400, rel=0.01)
        assert data["insertionDeltaV"] == pytest.approx(2972, abs=1)
        assert data["arrivalDeltaV"] == pytest.approx(2670, abs=1)
        assert data["totalDeltaV"] == pytest.approx(5642, abs=2)

    def test_non_positive_mass_rejected(self, client):
        payload = dict(SIMPLE_PAYLOAD, primaryBodyMass=0)
        response = client.post("/simple", json=payload)
        assert response.status_code == 422
        assert response.json()["error"] == "InvalidParameter"

    def test_negative_radius_rejected(self, client):
        payload = dict(SIMPLE_PAYLOAD, destinationOrbitRadius=-1.0)
        response = client.post("/simple", json=payload)
        assert response.status_code == 422
        assert "radius" in response.json()["detail"]

    def test_huge_radius_is_computed(self, client):
        payload = dict(SIMPLE_PAYLOAD, startingOrbitRadius=1.0e120, destinationOrbitRadius=2.0e120)
        response = client.post("/simple", json=payload)
        assert response.status_code == 200
        assert response.json()["transferTime"] > 0

    def test_out_of_range_radius_rejected(self, client):
        payload = dict(SIMPLE_PAYLOAD, startingOrbitRadius=1.0e300, destinationOrbitRadius=1.5e300)
        response = client.post("/simple", json=payload)
        assert response.status_code == 422
        assert response.json()["error"] == "InvalidParameter"

    def test_missing_field_rejected(self, client):
        payload = {k: v for k, v in SIMPLE_PAYLOAD.items() if k != "startingOrbitRadius"}
        response = client.post("/simple", json=payload)
        assert response.status_code == 422


class TestInterplanetaryEndpoint:
    """Tests for POST /interplanetary."""

    def test_values(self, client):
        response = client.post("/interplanetary", json=INTERPLANETARY_PAYLOAD)
        assert response.status_code == 200
        data = response.json()
        assert set(data) == RESPONSE_KEYS
        assert data["transferTime"] == pytest.approx(259.9 * 86400, rel=0.01)
        assert data["insertionDeltaV"] == pytest.approx(3598, abs=1)
        assert data["arrivalDeltaV"] == pytest.approx(2102, abs=1)
        assert data["totalDeltaV"] == pytest.approx(5700, abs=2)

    def test_invalid_planet_mass_rejected(self, client):
        payload = dict(INTERPLANETARY_PAYLOAD, startingPlanetMass=-5.0)
        response = client.post("/interplanetary", json=payload)
        assert response.status_code == 422
        assert response.json()["error"] == "InvalidParameter"


def test_health(client):
    from orbits import __version__

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_request_models_accept_field_names():
    from orbits.api.schemas import SimpleTransferRequest

    request = SimpleTransferRequest(
        primary_body_mass=1.0e24,
        starting_orbit_radius=7.0e6,
        destination_orbit_radius=4.2e7,
    )
    start, dest = request.build_orbits()
    assert start.primary_body is dest.primary_body


def test_interplanetary_request_builds_chain():
    from orbits.api.schemas import InterplanetaryTransferRequest

    request = InterplanetaryTransferRequest.model_validate(INTERPLANETARY_PAYLOAD)
    start, dest = request.build_orbits()
    assert start.primary_body is not dest.primary_body
    assert start.primary_body.orbit.primary_body is dest.primary_body.orbit.primary_body
    assert start.primary_body.orbit.radius == 1.496e11
