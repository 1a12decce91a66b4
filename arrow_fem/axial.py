# Axial stiffening (softening) estimate for launch compression
"""
AXIAL: LAUNCH COMPRESSION STIFFNESS FACTOR
==========================================

While the string accelerates the arrow, every section of the shaft pushes
the mass ahead of it, so the shaft is in axial compression and bends more
easily. A proper treatment adds a geometric stiffness matrix per element.
This module does NOT do that. It is a coarse approximation:

    a      = v^2 / (2 s)                 constant-acceleration launch
    P(x_i) = mass_ahead(x_i) * a         at every node
    Pmax   = max_i P(x_i)
    factor = max(0.2, 1 - alpha * Pmax)  alpha = 1e-6

and the whole reduced stiffness matrix is scaled by `factor`. alpha and
the 0.2 floor are untuned placeholders and are reproduced as they are.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .kernel.errors import InvalidParameter
from .mass import MassDistribution

AXIAL_ALPHA = 1e-6
AXIAL_FLOOR = 0.2


@dataclass(frozen=True)
class AxialStiffening:
    """
    Result of the axial estimate.

    Attributes:
    -----------
    acceleration : float
        Peak launch acceleration (m/s²)
    axial_forces : np.ndarray
        Compressive force P at each node (N)
    max_axial_force : float
        Pmax (N)
    factor : float
        Scalar applied to the reduced stiffness matrix, in [floor, 1]
    """
    acceleration: float
    axial_forces: np.ndarray
    max_axial_force: float
    factor: float


def is_active(velocity: Optional[float], power_stroke: Optional[float]) -> bool:
    """The stage runs only when both launch inputs are given and non-zero."""
    return bool(velocity) and bool(power_stroke)


def peak_acceleration(velocity: float, power_stroke: float) -> float:
    """a = v^2 / (2 s) for a constant acceleration over the power stroke."""
    if not velocity > 0.0:
        raise InvalidParameter(f"Launch velocity must be positive, got {velocity}")
    if not power_stroke > 0.0:
        raise InvalidParameter(f"Power stroke must be positive, got {power_stroke}")
    return velocity**2 / (2.0 * power_stroke)


def axial_force_profile(masses: MassDistribution, acceleration: float) -> np.ndarray:
    """P(x_i) = mass_ahead(x_i) * a for every node x_i = i * l."""
    le = masses.element_length
    return np.array(
        [masses.mass_ahead(i * le) * acceleration for i in range(masses.n_elements + 1)],
        dtype=float,
    )


def stiffness_factor(
    max_axial_force: float,
    alpha: float = AXIAL_ALPHA,
    floor: float = AXIAL_FLOOR
) -> float:
    return max(floor, 1.0 - alpha * max_axial_force)


def estimate_axial_stiffening(
    masses: MassDistribution,
    velocity: float,
    power_stroke: float,
    alpha: float = AXIAL_ALPHA,
    floor: float = AXIAL_FLOOR
) -> AxialStiffening:
    a = peak_acceleration(velocity, power_stroke)
    forces = axial_force_profile(masses, a)
    p_max = float(np.max(forces))
    return AxialStiffening(
        acceleration=a,
        axial_forces=forces,
        max_axial_force=p_max,
        factor=stiffness_factor(p_max, alpha, floor),
    )


def apply_axial_stiffening(Kr: np.ndarray, stiffening: AxialStiffening) -> np.ndarray:
    """Uniformly scaled copy of the reduced stiffness matrix."""
    return Kr * stiffening.factor
