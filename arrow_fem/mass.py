# Lumped nodal mass distribution and mass-ahead(x) lookup
"""
MASS: LUMPED NODAL MASSES
=========================

The shaft mass is spread uniformly: each of the n elements hands half of
its mass (shaft_mass / n / 2) to each of its two end nodes, so interior
nodes carry a full element mass and the two end nodes carry half.
Point masses (tip, nock, fletching) go to the node nearest their position.

    node:    0     1     2    ...   n-1     n
    mass:   m/2    m     m    ...    m     m/2   (+ point masses)

mass_ahead(x) is the mass between x and the tip. During launch that mass
is what the string accelerates through the shaft at x, so it sets the axial
compression used by the axial stiffening estimate.
"""

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .kernel.errors import InvalidParameter
from .model import PointMass

# keeps x = i * l (up to float error) in bucket i
_BUCKET_EPS = 1e-9


def nearest_node(position: float, element_length: float, n_elements: int) -> int:
    """
    Node index nearest to `position`, clamped to [0, n_elements].
    Halves round up, so a mass exactly between two nodes goes toward the tip.
    """
    idx = int(math.floor(position / element_length + 0.5))
    return min(max(idx, 0), n_elements)


def build_nodal_masses(
    length: float,
    n_elements: int,
    shaft_mass: float,
    point_masses: Iterable[PointMass] = ()
) -> np.ndarray:
    """
    Lumped mass at each node (kg), shape (n_elements + 1,).

    Point masses mapping to the same node accumulate.
    """
    if not length > 0.0:
        raise InvalidParameter(f"Shaft length must be positive, got {length}")
    if n_elements < 1:
        raise InvalidParameter(f"Element count must be positive, got {n_elements}")

    le = length / n_elements
    half = shaft_mass / n_elements / 2.0

    node_masses = np.zeros(n_elements + 1, dtype=float)
    for e in range(n_elements):
        node_masses[e] += half
        node_masses[e + 1] += half

    for pm in point_masses:
        node_masses[nearest_node(pm.position, le, n_elements)] += pm.mass

    return node_masses


@dataclass(frozen=True)
class MassDistribution:
    """
    Nodal masses plus the precomputed mass-ahead table.

    Attributes:
    -----------
    node_masses : np.ndarray
        Lumped mass per node (kg)
    element_length : float
        Uniform element length (m)
    ahead : np.ndarray
        ahead[i] = sum(node_masses[j] for j > i)
    """
    node_masses: np.ndarray
    element_length: float
    ahead: np.ndarray

    @property
    def n_elements(self) -> int:
        return len(self.node_masses) - 1

    @property
    def total_mass(self) -> float:
        return float(np.sum(self.node_masses))

    def bucket(self, x: float) -> int:
        idx = int(math.floor(x / self.element_length + _BUCKET_EPS))
        return min(max(idx, 0), self.n_elements)

    def mass_ahead(self, x: float) -> float:
        """Mass at nodes strictly beyond the bucket containing x (kg)."""
        return float(self.ahead[self.bucket(x)])


def build_mass_distribution(
    length: float,
    n_elements: int,
    shaft_mass: float,
    point_masses: Iterable[PointMass] = ()
) -> MassDistribution:
    node_masses = build_nodal_masses(length, n_elements, shaft_mass, point_masses)

    # suffix sums shifted by one: mass strictly beyond node i
    tail = np.cumsum(node_masses[::-1])[::-1]
    ahead = np.append(tail[1:], 0.0)

    return MassDistribution(
        node_masses=node_masses,
        element_length=length / n_elements,
        ahead=ahead,
    )
