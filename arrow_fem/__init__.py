# arrow_fem - Arrow shaft modal analysis
"""
ARROW_FEM: Natural Frequencies of an Arrow Shaft
================================================

Estimates EI from a static spine rating, models the shaft as a clamped-free
Euler-Bernoulli beam with lumped shaft and point masses (tip, nock,
fletching), and solves for the lowest natural frequencies and mode shapes.

ARCHITECTURE:
-------------
    kernel/         Beam FEM core (DOF indexing, assembly, reduction, eigen solve)
    units.py        Inch / grain / gram conversions
    model.py        ShaftSpec, PointMass, Node, Mode
    spine.py        Static spine <-> EI
    mass.py         Lumped nodal masses, mass_ahead(x)
    elements.py     Beam element stiffness and simplified lumped mass
    assembly.py     Global K, M for the shaft
    axial.py        Launch compression stiffness factor (approximation)
    analysis.py     analyze(): the one-call pipeline
    post.py         Mode shape post-processing
    explore.py      Parameter sweeps
    viz.py          Plots
"""

from .kernel import InvalidParameter, SingularSystem, ComputationWarning
from .model import ShaftSpec, PointMass, Node, Mode
from .spine import spine_to_ei, ei_to_spine
from .analysis import AnalysisParams, AnalysisResult, analyze
from .config import AnalysisConfig, CONFIG

__version__ = "0.1.0"
