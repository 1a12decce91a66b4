# One-call arrow shaft modal analysis
"""
ANALYSIS: SPINE + MASSES -> NATURAL MODES
=========================================

PIPELINE:
---------
    AnalysisParams (inches, grams, grains)
        │
        ├─ spine_to_ei                    EI
        ├─ build_mass_distribution        nodal masses, mass_ahead(x)
        ├─ assemble_shaft                 K, M          (2(n+1) square)
        ├─ reduce_system                  Kr, Mr, free  (node 0 clamped)
        ├─ estimate_axial_stiffening      Kr * factor   (only with v and s)
        └─ solve_modes                    modes

analyze() builds everything fresh from its arguments and returns every
intermediate matrix, so two calls with the same parameters give the same
result and can run in parallel.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .assembly import assemble_shaft
from .axial import AxialStiffening, apply_axial_stiffening, estimate_axial_stiffening, is_active
from .config import CONFIG, AnalysisConfig
from .kernel.errors import InvalidParameter
from .kernel.modal import solve_modes
from .kernel.reduce import reduce_system
from .mass import MassDistribution, build_mass_distribution
from .model import Mode, PointMass, ShaftSpec
from .spine import spine_to_ei
from .units import grains_to_kg, grams_to_kg, inches_to_m

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisParams:
    """
    Inputs of one analysis in archery units.

    Parameters:
    -----------
    length_in : float
        Shaft length (inches), nock end to tip
    spine : float
        Static spine rating
    shaft_mass_g : float, optional
        Bare shaft mass (grams); None uses the configured default (12 g)
    n_elements : int, optional
        Number of beam elements; None uses the configured default (20)
    tip_grains, nock_grains, fletching_grains : float
        Point masses (grains); 0 means absent. The tip sits at the shaft
        end, the nock at node 0, the fletching at fletching_pos_in.
    fletching_pos_in : float
        Fletching position (inches from the nock end)
    velocity : float, optional
        Exit velocity (m/s)
    power_stroke : float, optional
        Distance over which the string accelerates the arrow (m).
        Together with velocity this switches on the axial stiffening stage.
    max_modes : int, optional
        Modes to return; None uses the configured default (6)
    fixed_dofs : tuple, optional
        Constrained DOFs; None clamps node 0
    extra_point_masses : tuple of PointMass
        Further point masses in SI units (m, kg)
    """
    length_in: float
    spine: float
    shaft_mass_g: Optional[float] = None
    n_elements: Optional[int] = None
    tip_grains: float = 0.0
    nock_grains: float = 0.0
    fletching_grains: float = 0.0
    fletching_pos_in: float = 0.0
    velocity: Optional[float] = None
    power_stroke: Optional[float] = None
    max_modes: Optional[int] = None
    fixed_dofs: Optional[Tuple[int, ...]] = None
    extra_point_masses: Tuple[PointMass, ...] = ()


@dataclass
class AnalysisResult:
    """Everything one analyze() call produced."""
    shaft: ShaftSpec
    point_masses: List[PointMass]
    ei: float
    K: np.ndarray
    M: np.ndarray
    K_reduced: np.ndarray
    M_reduced: np.ndarray
    K_effective: np.ndarray
    free_dofs: np.ndarray
    masses: MassDistribution
    axial: Optional[AxialStiffening]
    modes: List[Mode]
    warnings: List[str] = field(default_factory=list)

    @property
    def frequencies(self) -> np.ndarray:
        return np.array([m.frequency for m in self.modes], dtype=float)

    @property
    def axial_factor(self) -> float:
        return self.axial.factor if self.axial is not None else 1.0

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary (matrices omitted)."""
        return {
            'ei': self.ei,
            'length': self.shaft.length,
            'n_elements': self.shaft.n_elements,
            'total_mass': self.masses.total_mass,
            'n_free_dofs': int(len(self.free_dofs)),
            'axial_factor': self.axial_factor,
            'max_axial_force': self.axial.max_axial_force if self.axial is not None else 0.0,
            'warnings': list(self.warnings),
            'modes': [
                {
                    'index': m.index,
                    'omega2': m.omega2,
                    'omega': m.omega,
                    'frequency': m.frequency,
                    'shape': m.shape.tolist(),
                }
                for m in self.modes
            ],
        }


def _check_non_negative(name: str, value: Optional[float]) -> None:
    if value is not None and not value >= 0.0:
        raise InvalidParameter(f"{name} must be non-negative, got {value}")


def build_point_masses(params: AnalysisParams, length: float) -> List[PointMass]:
    """Tip, nock and fletching masses in SI, skipping the ones that are zero."""
    for name in ('tip_grains', 'nock_grains', 'fletching_grains'):
        _check_non_negative(name, getattr(params, name))

    point_masses = []
    if params.tip_grains:
        point_masses.append(PointMass(length, grains_to_kg(params.tip_grains), 'tip'))
    if params.nock_grains:
        point_masses.append(PointMass(0.0, grains_to_kg(params.nock_grains), 'nock'))
    if params.fletching_grains:
        point_masses.append(PointMass(
            inches_to_m(params.fletching_pos_in),
            grains_to_kg(params.fletching_grains),
            'fletching',
        ))
    point_masses.extend(params.extra_point_masses)
    return point_masses


def build_shaft(params: AnalysisParams, config: AnalysisConfig = CONFIG) -> ShaftSpec:
    n_elements = params.n_elements if params.n_elements is not None else config.default_n_elements
    shaft_mass_g = params.shaft_mass_g if params.shaft_mass_g is not None else config.default_shaft_mass_g
    return ShaftSpec(
        length=inches_to_m(params.length_in),
        mass=grams_to_kg(shaft_mass_g),
        spine=params.spine,
        n_elements=n_elements,
    )


def analyze(params: AnalysisParams, config: AnalysisConfig = CONFIG) -> AnalysisResult:
    """
    Run the full modal analysis for one arrow.

    Raises:
        InvalidParameter: Bad geometry, spine, masses, launch inputs or fixed DOFs
        SingularSystem: The reduced mass matrix cannot be inverted

    Numerical defects in the eigen solve do not raise; they are emitted as
    ComputationWarning and listed in result.warnings.
    """
    shaft = build_shaft(params, config)
    point_masses = build_point_masses(params, shaft.length)
    _check_non_negative('velocity', params.velocity)
    _check_non_negative('power_stroke', params.power_stroke)

    max_modes = params.max_modes if params.max_modes is not None else config.default_max_modes
    if max_modes < 1:
        raise InvalidParameter(f"max_modes must be at least 1, got {max_modes}")
    fixed_dofs: Sequence[int] = params.fixed_dofs if params.fixed_dofs is not None else config.clamp_dofs

    ei = spine_to_ei(shaft.spine, config.spine_test_span_in, config.spine_test_load_kg)
    logger.debug("spine %.0f -> EI %.4e N·m²", shaft.spine, ei)

    masses = build_mass_distribution(shaft.length, shaft.n_elements, shaft.mass, point_masses)

    K, M = assemble_shaft(
        shaft.length, shaft.n_elements, shaft.mass, ei, point_masses,
        rotary_factor=config.rotary_inertia_factor,
    )
    K_reduced, M_reduced, free = reduce_system(K, M, fixed_dofs)
    logger.debug("Assembled %d DOFs, %d free", shaft.ndof, len(free))

    axial = None
    K_effective = K_reduced
    if is_active(params.velocity, params.power_stroke):
        axial = estimate_axial_stiffening(
            masses, params.velocity, params.power_stroke,
            alpha=config.axial_alpha, floor=config.axial_floor,
        )
        K_effective = apply_axial_stiffening(K_reduced, axial)
        logger.debug(
            "Axial stage: a=%.1f m/s², Pmax=%.2f N, factor=%.6f",
            axial.acceleration, axial.max_axial_force, axial.factor,
        )

    modes, messages = solve_modes(
        K_effective, M_reduced, free, shaft.ndof,
        max_modes=max_modes,
        mass_cond_limit=config.mass_cond_limit,
        symmetry_rtol=config.symmetry_rtol,
        eigen_rtol=config.eigen_rtol,
    )

    return AnalysisResult(
        shaft=shaft,
        point_masses=point_masses,
        ei=ei,
        K=K,
        M=M,
        K_reduced=K_reduced,
        M_reduced=M_reduced,
        K_effective=K_effective,
        free_dofs=free,
        masses=masses,
        axial=axial,
        modes=modes,
        warnings=messages,
    )
