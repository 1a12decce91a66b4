# arrow_fem/config.py
"""
Analysis configuration and defaults.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .axial import AXIAL_ALPHA, AXIAL_FLOOR
from .elements import ROTARY_INERTIA_FACTOR
from .kernel.modal import EIGEN_RTOL, MASS_COND_LIMIT, SYMMETRY_RTOL
from .kernel.reduce import CLAMP_DOFS
from .spine import SPINE_TEST_LOAD_KG, SPINE_TEST_SPAN_IN


@dataclass(frozen=True)
class AnalysisConfig:
    """Defaults and numerical constants for one analysis run."""

    # Discretization / output
    default_n_elements: int = 20
    default_max_modes: int = 6
    default_shaft_mass_g: float = 12.0

    # Static spine test
    spine_test_span_in: float = SPINE_TEST_SPAN_IN
    spine_test_load_kg: float = SPINE_TEST_LOAD_KG

    # Simplified lumped mass
    rotary_inertia_factor: float = ROTARY_INERTIA_FACTOR

    # Axial stiffening approximation (placeholders, not calibrated)
    axial_alpha: float = AXIAL_ALPHA
    axial_floor: float = AXIAL_FLOOR

    # Boundary condition: clamp at the nock (node 0)
    clamp_dofs: Tuple[int, ...] = CLAMP_DOFS

    # Eigen solve. mass_cond_limit is a conditioning guard beyond the
    # positive-diagonal check; None disables it.
    mass_cond_limit: Optional[float] = MASS_COND_LIMIT
    symmetry_rtol: float = SYMMETRY_RTOL
    eigen_rtol: float = EIGEN_RTOL


# Global config instance
CONFIG = AnalysisConfig()
