# arrow_fem/kernel/assemble.py
"""
ASSEMBLY: Global Matrix Scatter-Add
===================================

Element contributions are added into the global matrices through their
DOF maps. The same routine builds both K and M:

    for each element:
        for each (a, b) in element matrix:
            G[dof_map[a], dof_map[b]] += ke[a, b]
"""

import numpy as np
from typing import List, Tuple


def scatter_add(G: np.ndarray, dof_map: List[int], ke: np.ndarray) -> None:
    """
    Add an element matrix into the global matrix G (in-place).

    Parameters:
    -----------
    G : np.ndarray
        Global matrix, shape (ndof, ndof)
    dof_map : List[int]
        Global DOF index for each row/column of ke
    ke : np.ndarray
        Element matrix, shape (len(dof_map), len(dof_map))
    """
    n_element_dofs = len(dof_map)

    assert ke.shape == (n_element_dofs, n_element_dofs), \
        f"Element matrix shape {ke.shape} doesn't match dof_map length {n_element_dofs}"

    for a in range(n_element_dofs):
        ia = dof_map[a]
        for b in range(n_element_dofs):
            G[ia, dof_map[b]] += ke[a, b]


def assemble_global(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble a global matrix from (dof_map, ke) element contributions.

    Parameters:
    -----------
    ndof : int
        Total number of DOFs, 2 x n_nodes for the beam
    contributions : List[Tuple[List[int], np.ndarray]]
        One (dof_map, ke) tuple per element

    Returns:
    --------
    np.ndarray
        Global matrix, shape (ndof, ndof)
    """
    G = np.zeros((ndof, ndof), dtype=float)
    for dof_map, ke in contributions:
        scatter_add(G, dof_map, ke)
    return G


def add_diagonal(G: np.ndarray, dof: int, value: float) -> None:
    """Add a lumped value onto one diagonal entry (in-place)."""
    G[dof, dof] += value
