# File: tests/test_mass.py
"""
Test the lumped mass distribution and the mass-ahead(x) lookup.
"""

import numpy as np
import pytest

from arrow_fem.mass import build_nodal_masses, build_mass_distribution, nearest_node
from arrow_fem.model import PointMass
from arrow_fem.kernel.errors import InvalidParameter


L = 0.762        # 30"
N = 24
SHAFT = 0.014    # 14 g


def test_uniform_shaft_half_masses_at_ends():
    """
    Each element gives half its mass to each end node:
    interior nodes carry a full element mass, the ends carry half.
    """
    m = build_nodal_masses(L, N, SHAFT)
    m_elem = SHAFT / N

    assert m.shape == (N + 1,)
    assert np.isclose(m[0], m_elem / 2)
    assert np.isclose(m[-1], m_elem / 2)
    np.testing.assert_allclose(m[1:-1], m_elem)
    assert np.isclose(m.sum(), SHAFT)


def test_point_masses_accumulate_on_nearest_node():
    le = L / N
    pms = [
        PointMass(2.1 * le, 0.001, 'a'),   # -> node 2
        PointMass(1.9 * le, 0.002, 'b'),   # -> node 2
        PointMass(5.6 * le, 0.003, 'c'),   # -> node 6
    ]
    bare = build_nodal_masses(L, N, SHAFT)
    m = build_nodal_masses(L, N, SHAFT, pms)

    assert np.isclose(m[2] - bare[2], 0.003)
    assert np.isclose(m[6] - bare[6], 0.003)
    assert np.isclose(m.sum(), SHAFT + 0.006)


def test_point_mass_beyond_tip_goes_to_tip_node():
    """Out-of-range positions are clamped, never rejected."""
    bare = build_nodal_masses(L, N, SHAFT)
    m = build_nodal_masses(L, N, SHAFT, [PointMass(L + 0.25, 0.008, 'tip')])
    assert np.isclose(m[N] - bare[N], 0.008)

    m = build_nodal_masses(L, N, SHAFT, [PointMass(-0.1, 0.0005, 'nock')])
    assert np.isclose(m[0] - bare[0], 0.0005)


def test_nearest_node_clamps():
    assert nearest_node(-1.0, 0.1, 10) == 0
    assert nearest_node(5.0, 0.1, 10) == 10
    assert nearest_node(0.34, 0.1, 10) == 3


def test_mass_ahead_non_increasing_and_zero_at_tip():
    pms = [PointMass(L, 0.0081, 'tip'), PointMass(0.0, 0.0005, 'nock'), PointMass(0.05, 0.0013, 'fletching')]
    dist = build_mass_distribution(L, N, SHAFT, pms)

    xs = np.linspace(-0.1, L + 0.1, 500)
    ahead = np.array([dist.mass_ahead(x) for x in xs])

    assert np.all(np.diff(ahead) <= 1e-15), "mass_ahead must not grow toward the tip"
    assert dist.mass_ahead(L) == 0.0
    assert dist.mass_ahead(L + 1.0) == 0.0
    # everything except node 0 is ahead of the clamp
    assert np.isclose(dist.mass_ahead(0.0), dist.total_mass - dist.node_masses[0])


def test_mass_ahead_on_node_positions():
    """x exactly on node i uses bucket i (mass strictly beyond node i)."""
    dist = build_mass_distribution(L, N, SHAFT)
    le = L / N
    for i in range(N + 1):
        expected = dist.node_masses[i + 1:].sum()
        assert np.isclose(dist.mass_ahead(i * le), expected)


def test_invalid_geometry_rejected():
    with pytest.raises(InvalidParameter):
        build_nodal_masses(0.0, N, SHAFT)
    with pytest.raises(InvalidParameter):
        build_nodal_masses(L, 0, SHAFT)
    with pytest.raises(InvalidParameter):
        PointMass(0.1, -0.001)
