# arrow_fem/kernel/dof.py
"""
DOF MANAGER: Beam Degree of Freedom Indexing
============================================

PURPOSE:
--------
Maps (node_id, local_dof) to global DOF indices for the shaft model.
A planar Euler-Bernoulli beam carries two DOFs per node:

    local 0 -> w      transverse displacement
    local 1 -> theta  rotation

so node k owns global DOFs [2k, 2k+1] and element e (nodes e, e+1)
scatters into [2e, 2e+1, 2e+2, 2e+3].

USAGE:
------
    dof = DOFManager()
    dof.idx(3, W)              # -> 6
    dof.element_dof_map(3)     # -> [6, 7, 8, 9]
    dof.clamped_dofs(0)        # -> [0, 1]
"""

from dataclasses import dataclass
from typing import List

W = 0        # transverse displacement
THETA = 1    # rotation


@dataclass(frozen=True)
class DOFManager:
    """
    Degree-of-freedom bookkeeping for a chain of 2-node beam elements.

    Attributes:
    -----------
    dof_per_node : int
        2 for the planar beam (w, theta).
    """
    dof_per_node: int = 2

    def idx(self, node_id: int, local_dof: int) -> int:
        """Global index of a node's local DOF."""
        return self.dof_per_node * node_id + local_dof

    def ndof(self, n_nodes: int) -> int:
        """Total DOFs for n_nodes nodes (size of K and M)."""
        return self.dof_per_node * n_nodes

    def node_dofs(self, node_id: int) -> List[int]:
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, element_id: int) -> List[int]:
        """
        Scatter indices for element `element_id`, which joins nodes
        element_id and element_id + 1.

        Examples:
        ---------
        >>> DOFManager().element_dof_map(0)
        [0, 1, 2, 3]
        """
        return self.node_dofs(element_id) + self.node_dofs(element_id + 1)

    def clamped_dofs(self, node_id: int = 0) -> List[int]:
        """Displacement and rotation of a rigidly clamped node."""
        return self.node_dofs(node_id)

    def translational_dofs(self, n_nodes: int) -> List[int]:
        """All w DOFs, one per node."""
        return [self.idx(k, W) for k in range(n_nodes)]


BEAM_DOF = DOFManager()
