# global K, M assembly for the shaft (uses kernel internally)

import numpy as np
from typing import Iterable, Tuple

from .elements import beam_local_stiffness, beam_lumped_mass, ROTARY_INERTIA_FACTOR
from .kernel.assemble import add_diagonal, scatter_add
from .kernel.dof import BEAM_DOF, W
from .kernel.errors import InvalidParameter
from .mass import nearest_node
from .model import PointMass


def assemble_shaft(
    length: float,
    n_elements: int,
    shaft_mass: float,
    EI: float,
    point_masses: Iterable[PointMass] = (),
    rotary_factor: float = ROTARY_INERTIA_FACTOR
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build global stiffness K and mass M for a uniform shaft of n_elements beams.

    Returns:
        K, M: both shape (2(n+1), 2(n+1)), symmetric. M is diagonal.
    """
    if not length > 0.0:
        raise InvalidParameter(f"Shaft length must be positive, got {length}")
    if n_elements < 1:
        raise InvalidParameter(f"Element count must be positive, got {n_elements}")

    ndof = BEAM_DOF.ndof(n_elements + 1)
    K = np.zeros((ndof, ndof), dtype=float)
    M = np.zeros((ndof, ndof), dtype=float)

    le = length / n_elements
    m_line = shaft_mass / length

    # identical for every element of a uniform shaft
    ke = beam_local_stiffness(EI, le)
    me = beam_lumped_mass(m_line, le, rotary_factor)

    for e in range(n_elements):
        dof_map = BEAM_DOF.element_dof_map(e)
        scatter_add(K, dof_map, ke)
        scatter_add(M, dof_map, me)

    for pm in point_masses:
        node = nearest_node(pm.position, le, n_elements)
        add_diagonal(M, BEAM_DOF.idx(node, W), pm.mass)

    return K, M
