# arrow_fem/kernel/modal.py
"""Modal analysis: generalized eigen solve, result checks and mode expansion."""

import logging
import warnings

import numpy as np
from scipy.linalg import eig, eigh, LinAlgError
from typing import List, Optional, Tuple

from ..model import Mode
from .errors import ComputationWarning, SingularSystem
from .reduce import expand_vector

logger = logging.getLogger(__name__)

MASS_COND_LIMIT = 1e12
SYMMETRY_RTOL = 1e-9
EIGEN_RTOL = 1e-9


def check_mass_matrix(Mr: np.ndarray, cond_limit: Optional[float] = MASS_COND_LIMIT) -> None:
    """
    Raise SingularSystem if the reduced mass matrix cannot be inverted.

    A missing shaft mass leaves the rotational DOFs without inertia, which
    shows up here as a zero diagonal entry.

    cond_limit is a conditioning guard on top of that: a positive diagonal
    is always invertible, but once its largest to smallest entry ratio passes
    cond_limit eigh loses the light DOFs to round-off. None turns the guard off.
    """
    diag = np.diag(Mr)
    if not np.all(np.isfinite(Mr)):
        raise SingularSystem("Reduced mass matrix contains NaN or Inf entries")
    if np.any(diag <= 0.0):
        zero_dofs = np.flatnonzero(diag <= 0.0).tolist()
        raise SingularSystem(
            f"Reduced mass matrix has non-positive diagonal at reduced DOFs {zero_dofs}. "
            "Check the shaft mass."
        )
    if cond_limit is None:
        return
    cond = np.linalg.cond(Mr)
    if not np.isfinite(cond) or cond > cond_limit:
        raise SingularSystem(
            f"Reduced mass matrix is ill-conditioned (cond={cond:.2e}). Need cond < {cond_limit:.0e}."
        )


def is_symmetric(A: np.ndarray, rtol: float = SYMMETRY_RTOL) -> bool:
    scale = max(np.max(np.abs(A)), 1e-300)
    return bool(np.max(np.abs(A - A.T)) <= rtol * scale)


def _report(messages: List[str], message: str) -> None:
    messages.append(message)
    logger.warning(message)
    warnings.warn(message, ComputationWarning, stacklevel=3)


def solve_modes(
    Kr: np.ndarray,
    Mr: np.ndarray,
    free: np.ndarray,
    ndof: int,
    max_modes: int = 6,
    mass_cond_limit: Optional[float] = MASS_COND_LIMIT,
    symmetry_rtol: float = SYMMETRY_RTOL,
    eigen_rtol: float = EIGEN_RTOL
) -> Tuple[List[Mode], List[str]]:
    """
    Compute natural frequencies and mode shapes of the reduced system.

    Solves the generalized eigenvalue problem K·φ = ω²·M·φ directly with
    scipy's symmetric solver, which keeps the eigenvalues real. Only when K
    or M is asymmetric (an assembly defect) does it fall back to the general
    solver, and that fallback is reported.

    Args:
        Kr: Reduced stiffness matrix (n_free x n_free)
        Mr: Reduced mass matrix (n_free x n_free)
        free: Full DOF index of each reduced DOF
        ndof: Size of the full DOF space
        max_modes: Number of modes to return
        mass_cond_limit: Max condition number of Mr before SingularSystem
            (None disables the conditioning guard)
        symmetry_rtol: Relative tolerance of the symmetry check
        eigen_rtol: Relative tolerance (of the largest |ω²|) for clamping
            negative or complex eigenvalues

    Returns:
        modes: min(max_modes, n_free) modes, ascending in ω²
        messages: ComputationWarning messages (also emitted via warnings.warn)

    Raises:
        SingularSystem: If Mr is non-invertible
    """
    n_free = Kr.shape[0]
    check_mass_matrix(Mr, mass_cond_limit)

    messages: List[str] = []
    n_actual = min(max_modes, n_free)

    if is_symmetric(Kr, symmetry_rtol) and is_symmetric(Mr, symmetry_rtol):
        try:
            eigenvalues, eigenvectors = eigh(Kr, Mr)
        except LinAlgError as e:
            raise SingularSystem(f"Eigenvalue solve failed: {e}")
    else:
        _report(messages, "Stiffness or mass matrix is not symmetric; using the general eigensolver")
        raw_values, raw_vectors = eig(Kr, Mr)
        if not np.all(np.isfinite(raw_values)):
            raise SingularSystem("Eigenvalue solve produced non-finite eigenvalues")

        scale = max(np.max(np.abs(raw_values)), 1.0)
        imag = np.abs(raw_values.imag)
        for k in np.flatnonzero(imag > eigen_rtol * scale):
            _report(
                messages,
                f"Eigenvalue {raw_values[k]:.6e} has a non-negligible imaginary part"
            )
        eigenvalues = raw_values.real
        eigenvectors = raw_vectors.real

    # ascending ω²
    order = np.argsort(eigenvalues, kind="stable")
    eigenvalues = eigenvalues[order]
    eigenvectors = eigenvectors[:, order]

    tol = eigen_rtol * max(np.max(np.abs(eigenvalues)), 1.0)
    modes = []
    for k in range(n_actual):
        omega2 = float(eigenvalues[k])
        if omega2 < -tol:
            _report(messages, f"Mode {k + 1}: eigenvalue {omega2:.6e} is negative beyond tolerance")
        omega2 = max(omega2, 0.0)
        omega = float(np.sqrt(omega2))
        modes.append(Mode(
            index=k + 1,
            omega2=omega2,
            omega=omega,
            frequency=omega / (2.0 * np.pi),
            shape=expand_vector(eigenvectors[:, k], free, ndof),
        ))

    logger.debug("Solved %d of %d modes (n_free=%d)", len(modes), max_modes, n_free)
    return modes, messages
