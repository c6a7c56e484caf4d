"""API tests: discharge curve profile endpoints."""
import pytest

pytestmark = pytest.mark.api


def test_list_profiles(client):
    """GET /api/profiles lists built-in presets with their curve parameters."""
    r = client.get("/api/profiles")
    assert r.status_code == 200
    by_name = {p["name"]: p for p in r.json()}
    assert {"lipo_1s", "liion_18650"} <= set(by_name)
    lipo = by_name["lipo_1s"]["curve"]
    assert lipo["low"] == {"x1": 3.0, "y1": 0.0, "x2": 3.3, "y2": 5.0}
    assert lipo["high"] == {"x1": 4.1, "y1": 95.0, "x2": 4.2, "y2": 100.0}
    assert lipo["sigmoid"]["a"] == 100.0


def test_get_profile_unknown_404(client):
    r = client.get("/api/profiles/nimh_aa")
    assert r.status_code == 404


@pytest.mark.parametrize(
    "voltage,expected",
    [(2.5, 0.0), (3.0, 0.0), (3.3, 5.0), (4.2, 100.0), (4.5, 100.0)],
)
def test_evaluate_profile_anchor_values(client, voltage, expected):
    """Curve saturates outside its range and hits the linear anchors exactly."""
    r = client.get("/api/profiles/lipo_1s/evaluate", params={"voltage": voltage})
    assert r.status_code == 200
    data = r.json()
    assert data["profile"] == "lipo_1s"
    assert data["voltage"] == voltage
    assert data["percentage"] == expected


def test_evaluate_profile_requires_voltage(client):
    r = client.get("/api/profiles/lipo_1s/evaluate")
    assert r.status_code == 422


def test_evaluate_unknown_profile_404(client):
    r = client.get("/api/profiles/nimh_aa/evaluate", params={"voltage": 3.7})
    assert r.status_code == 404
