# mode shape post-processing: nodal values, normalization, effective mass, tables

import numpy as np
import pandas as pd
from typing import List, Tuple

from .kernel.dof import BEAM_DOF, THETA, W
from .model import Mode


def nodal_displacements(shape: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split a full-DOF mode shape into per-node (w, theta) arrays.

    Parameters:
    -----------
    shape : np.ndarray
        Full DOF vector [w0, theta0, w1, theta1, ...]

    Returns:
    --------
    w, theta : np.ndarray
        Transverse displacement and rotation at each node
    """
    dpn = BEAM_DOF.dof_per_node
    return shape[W::dpn].copy(), shape[THETA::dpn].copy()


def normalize_shape(shape: np.ndarray) -> np.ndarray:
    """
    Scale a mode shape so max |w| = 1 and the tip displacement is non-negative.

    Eigen solvers return shapes with arbitrary sign and mass normalization;
    this makes shapes from different runs comparable for plotting.
    """
    w, _ = nodal_displacements(shape)
    peak = np.max(np.abs(w))
    if peak == 0.0:
        return shape.copy()
    scaled = shape / peak
    if w[-1] < 0.0:
        scaled = -scaled
    return scaled


def count_nodal_points(w: np.ndarray, rtol: float = 1e-6) -> int:
    """
    Number of zero crossings of w along the shaft, not counting the clamp.

    Mode k of a clamped-free beam has k - 1 of them. Values below
    rtol * max|w| are treated as zero and skipped.
    """
    tol = rtol * np.max(np.abs(w)) if len(w) else 0.0
    signs = [np.sign(v) for v in w[1:] if abs(v) > tol]
    return int(sum(1 for a, b in zip(signs, signs[1:]) if a != b))


def participation_factors(modes: List[Mode], M: np.ndarray) -> np.ndarray:
    """
    Transverse modal participation factor for each mode.

    Gamma_k = (phi_k^T M r) / (phi_k^T M phi_k), with r = 1 on every w DOF
    (a rigid transverse translation of the whole shaft).
    """
    r = np.zeros(M.shape[0])
    r[BEAM_DOF.translational_dofs(M.shape[0] // BEAM_DOF.dof_per_node)] = 1.0

    gamma = np.zeros(len(modes))
    for k, mode in enumerate(modes):
        phi = mode.shape
        m_star = phi @ M @ phi
        if m_star > 0:
            gamma[k] = (phi @ M @ r) / m_star
    return gamma


def effective_modal_mass(modes: List[Mode], M: np.ndarray) -> np.ndarray:
    """
    Transverse effective mass of each mode (kg).

    Over all modes of the reduced system these add up to the translational
    mass of the free nodes.
    """
    r = np.zeros(M.shape[0])
    r[BEAM_DOF.translational_dofs(M.shape[0] // BEAM_DOF.dof_per_node)] = 1.0

    eff_mass = np.zeros(len(modes))
    for k, mode in enumerate(modes):
        phi = mode.shape
        m_star = phi @ M @ phi
        if m_star > 0:
            L = phi @ M @ r
            eff_mass[k] = L**2 / m_star
    return eff_mass


def modes_table(result) -> pd.DataFrame:
    """
    One row per mode of an AnalysisResult: frequency, ω², nodal points,
    effective mass.
    """
    eff = effective_modal_mass(result.modes, result.M)
    rows = []
    for k, mode in enumerate(result.modes):
        w, _ = nodal_displacements(mode.shape)
        rows.append({
            'mode': mode.index,
            'frequency_hz': mode.frequency,
            'omega': mode.omega,
            'omega2': mode.omega2,
            'nodal_points': count_nodal_points(w),
            'effective_mass_kg': eff[k],
        })
    return pd.DataFrame(rows)
