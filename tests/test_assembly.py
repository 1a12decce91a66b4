# File: tests/test_assembly.py
"""
Test element matrices and global K, M assembly for the shaft.
"""

import numpy as np
import pytest

from arrow_fem.assembly import assemble_shaft
from arrow_fem.elements import beam_local_stiffness, beam_lumped_mass
from arrow_fem.kernel.assemble import assemble_global
from arrow_fem.kernel.dof import DOFManager, BEAM_DOF
from arrow_fem.kernel.reduce import reduce_system
from arrow_fem.model import PointMass


def test_dof_manager_indexing():
    dof = DOFManager()
    assert dof.idx(0, 0) == 0
    assert dof.idx(3, 1) == 7
    assert dof.ndof(25) == 50
    assert dof.element_dof_map(0) == [0, 1, 2, 3]
    assert dof.element_dof_map(4) == [8, 9, 10, 11]
    assert dof.clamped_dofs() == [0, 1]


def test_local_stiffness_matches_closed_form():
    EI, l = 5.0, 0.05
    k = beam_local_stiffness(EI, l)
    a = EI / l**3

    assert k.shape == (4, 4)
    np.testing.assert_allclose(k, k.T)
    assert np.isclose(k[0, 0], 12 * a)
    assert np.isclose(k[0, 1], 6 * l * a)
    assert np.isclose(k[1, 1], 4 * l * l * a)
    assert np.isclose(k[1, 3], 2 * l * l * a)
    assert np.isclose(k[2, 3], -6 * l * a)

    # rigid-body translation and rotation produce no force
    np.testing.assert_allclose(k @ np.array([1.0, 0.0, 1.0, 0.0]), 0.0, atol=1e-9)
    np.testing.assert_allclose(k @ np.array([0.0, 1.0, l, 1.0]), 0.0, atol=1e-9)


def test_lumped_mass_is_diagonal_simplification():
    """
    Half the element mass on w, 0.01 * m l^3 / 12 on theta, no coupling.
    """
    m_line, l = 0.02, 0.04
    me = beam_lumped_mass(m_line, l)

    np.testing.assert_allclose(me, np.diag(np.diag(me)))
    assert np.isclose(me[0, 0], m_line * l / 2)
    assert np.isclose(me[2, 2], m_line * l / 2)
    assert np.isclose(me[1, 1], 0.01 * m_line * l**3 / 12)
    assert np.isclose(me[3, 3], me[1, 1])


def test_global_matrices_size_and_symmetry():
    n = 24
    K, M = assemble_shaft(0.762, n, 0.014, 5.09, [PointMass(0.762, 0.0081)])

    assert K.shape == (2 * (n + 1), 2 * (n + 1))
    assert M.shape == K.shape
    np.testing.assert_allclose(K, K.T, rtol=1e-12, atol=0.0)
    np.testing.assert_allclose(M, M.T, rtol=1e-12, atol=0.0)
    assert np.all(np.diag(M) > 0)
    print("✓ K and M are symmetric")


def test_mass_conservation_and_point_masses():
    """Translational diagonal of M sums to shaft mass + point masses."""
    L, n, shaft = 0.762, 24, 0.014
    pms = [PointMass(L, 0.0081), PointMass(0.0, 0.0005), PointMass(0.0508, 0.0013)]
    _, M = assemble_shaft(L, n, shaft, 5.0, pms)

    w_dofs = BEAM_DOF.translational_dofs(n + 1)
    assert np.isclose(M[w_dofs, w_dofs].sum(), shaft + 0.0081 + 0.0005 + 0.0013)
    # tip mass lands on the tip w DOF
    _, M_bare = assemble_shaft(L, n, shaft, 5.0)
    assert np.isclose(M[2 * n, 2 * n] - M_bare[2 * n, 2 * n], 0.0081)


def test_assemble_global_matches_loop():
    """Kernel scatter-add gives the same K as the shaft assembler."""
    L, n, EI = 0.5, 4, 3.0
    ke = beam_local_stiffness(EI, L / n)
    K_kernel = assemble_global(BEAM_DOF.ndof(n + 1), [(BEAM_DOF.element_dof_map(e), ke) for e in range(n)])
    K, _ = assemble_shaft(L, n, 0.01, EI)
    np.testing.assert_allclose(K_kernel, K)


def test_cantilever_tip_load_deflection():
    """
    Static check of the assembled K: a clamped shaft with tip load P
    deflects P L^3 / (3 EI) and rotates P L^2 / (2 EI). Hermite beam
    elements reproduce this exactly.
    """
    L, n, EI, P = 0.762, 8, 5.09, 2.0
    K, M = assemble_shaft(L, n, 0.014, EI)
    Kr, _, free = reduce_system(K, M)

    F = np.zeros(K.shape[0])
    F[BEAM_DOF.idx(n, 0)] = -P
    d = np.zeros(K.shape[0])
    d[free] = np.linalg.solve(Kr, F[free])

    assert np.isclose(d[BEAM_DOF.idx(n, 0)], -P * L**3 / (3 * EI), rtol=1e-9)
    assert np.isclose(d[BEAM_DOF.idx(n, 1)], -P * L**2 / (2 * EI), rtol=1e-9)
