# arrow_fem/kernel - beam FEM core
"""
KERNEL: DOF INDEXING, ASSEMBLY, REDUCTION, EIGEN SOLVE
======================================================

The kernel knows nothing about arrows. It needs:
- A way to map (node_id, local_dof) -> global_dof_index
- Element matrices to scatter into K and M
- The fixed DOF list
- A generalized symmetric eigen solver (scipy)

The shaft-specific pieces (spine conversion, masses, axial estimate) live
one level up and feed it.
"""

from .dof import DOFManager, BEAM_DOF, W, THETA
from .errors import InvalidParameter, SingularSystem, ComputationWarning
from .assemble import assemble_global, scatter_add
from .reduce import reduce_system, expand_vector
from .modal import solve_modes

__all__ = [
    'DOFManager', 'BEAM_DOF', 'W', 'THETA',
    'InvalidParameter', 'SingularSystem', 'ComputationWarning',
    'assemble_global', 'scatter_add',
    'reduce_system', 'expand_vector',
    'solve_modes',
]
