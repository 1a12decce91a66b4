# File: tests/test_api.py
"""
Test the REST surface with FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


SCENARIO = {
    'length_in': 30.0,
    'n_elements': 24,
    'spine': 500.0,
    'shaft_mass_g': 14.0,
    'tip_grains': 125.0,
    'nock_grains': 8.0,
    'fletching_grains': 20.0,
    'fletching_pos_in': 2.0,
    'velocity': 75.0,
    'power_stroke': 0.7,
}


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()['status'] == 'ok'


def test_analyze_scenario(client):
    response = client.post("/api/analyze", json=SCENARIO)
    assert response.status_code == 200

    data = response.json()
    assert data['ei'] > 0
    assert data['n_free_dofs'] == 48
    assert data['axial_factor'] < 1.0
    assert len(data['modes']) == 6
    freqs = [m['frequency'] for m in data['modes']]
    assert freqs == sorted(freqs)
    assert len(data['modes'][0]['w']) == 25
    assert data['modes'][0]['w'][0] == 0.0


def test_nonpositive_spine_is_422(client):
    response = client.post("/api/analyze", json={**SCENARIO, 'spine': 0.0})
    assert response.status_code == 422


def test_singular_mass_is_422(client):
    response = client.post("/api/analyze", json={**SCENARIO, 'shaft_mass_g': 0.0})
    assert response.status_code == 422
    assert 'mass' in response.json()['detail'].lower()


def test_export_csv(client):
    response = client.post("/api/export/csv", json=SCENARIO)
    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/csv')
    lines = response.text.strip().splitlines()
    assert lines[0].startswith('mode,frequency_hz')
    assert len(lines) == 7
