# ShaftSpec, PointMass, Node, Mode (dataclasses)

from dataclasses import dataclass, field

import numpy as np

from .kernel.errors import InvalidParameter


@dataclass(frozen=True)
class Node:
    id: int
    x: float


@dataclass(frozen=True)
class ShaftSpec:
    """
    Arrow shaft discretized into n_elements uniform Euler-Bernoulli beam elements.
    SI units: length (m), mass (kg, distributed uniformly), spine (dimensionless).
    Node 0 is the clamped nock end, node n_elements is the tip.
    """
    length: float
    mass: float
    spine: float
    n_elements: int

    def __post_init__(self):
        if not self.length > 0.0:
            raise InvalidParameter(f"Shaft length must be positive, got {self.length}")
        if not self.spine > 0.0:
            raise InvalidParameter(f"Spine must be positive, got {self.spine}")
        n = self.n_elements
        if isinstance(n, bool) or not isinstance(n, (int, float, np.integer, np.floating)) \
                or not float(n).is_integer() or n < 1:
            raise InvalidParameter(f"Element count must be a positive integer, got {n}")
        # 20.0 is accepted and stored as 20
        object.__setattr__(self, 'n_elements', int(n))
        if not self.mass >= 0.0:
            raise InvalidParameter(f"Shaft mass must be non-negative, got {self.mass}")

    @property
    def element_length(self) -> float:
        return self.length / self.n_elements

    @property
    def n_nodes(self) -> int:
        return self.n_elements + 1

    @property
    def ndof(self) -> int:
        return 2 * self.n_nodes

    def nodes(self) -> dict[int, Node]:
        le = self.element_length
        return {i: Node(i, i * le) for i in range(self.n_nodes)}


@dataclass(frozen=True)
class PointMass:
    """
    Concentrated mass (kg) at `position` (m from the nock end).
    Positions outside [0, L] are allowed; they land on the nearest end node.
    """
    position: float
    mass: float
    label: str = ""

    def __post_init__(self):
        if not self.mass >= 0.0:
            raise InvalidParameter(f"Point mass '{self.label}' must be non-negative, got {self.mass}")


@dataclass(frozen=True)
class Mode:
    """
    One natural mode of the clamped shaft.

    omega2 is clamped to >= 0. shape lives in the full DOF space
    [w0, theta0, w1, theta1, ...] and is zero at the fixed DOFs.
    """
    index: int
    omega2: float
    omega: float
    frequency: float
    shape: np.ndarray = field(repr=False, compare=False)
