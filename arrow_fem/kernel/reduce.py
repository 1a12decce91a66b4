# arrow_fem/kernel/reduce.py
"""Boundary-condition reduction: drop fixed DOFs and map back to full space."""

import numpy as np
from typing import Sequence, Tuple

from .errors import InvalidParameter

CLAMP_DOFS = (0, 1)  # w and theta at node 0 (nock end)


def reduce_system(
    K: np.ndarray,
    M: np.ndarray,
    fixed_dofs: Sequence[int] = CLAMP_DOFS
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Partition K and M to the free DOFs.

    Args:
        K: Global stiffness matrix (ndof x ndof)
        M: Global mass matrix (ndof x ndof)
        fixed_dofs: Constrained DOF indices; default clamps node 0

    Returns:
        Kr: Reduced stiffness matrix
        Mr: Reduced mass matrix
        free: free[i] is the full DOF index of reduced DOF i (ascending)

    Raises:
        InvalidParameter: If a fixed index is out of range or no DOF is left free
    """
    ndof = K.shape[0]
    if K.shape != (ndof, ndof) or M.shape != (ndof, ndof):
        raise InvalidParameter(
            f"K {K.shape} and M {M.shape} must be square and of equal size"
        )

    fixed = set()
    for dof in fixed_dofs:
        if int(dof) != dof or not 0 <= dof < ndof:
            raise InvalidParameter(f"Fixed DOF {dof} is out of range [0, {ndof - 1}]")
        fixed.add(int(dof))

    free = np.array([i for i in range(ndof) if i not in fixed], dtype=int)
    if len(free) == 0:
        raise InvalidParameter("Every DOF is fixed - nothing left to solve")

    Kr = K[np.ix_(free, free)]
    Mr = M[np.ix_(free, free)]
    return Kr, Mr, free


def expand_vector(reduced: np.ndarray, free: np.ndarray, ndof: int) -> np.ndarray:
    """Place a reduced-space vector into full DOF space, zero at fixed DOFs."""
    full = np.zeros(ndof, dtype=float)
    full[free] = reduced
    return full
