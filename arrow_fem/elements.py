# Euler-Bernoulli beam element stiffness + simplified lumped mass

import numpy as np

# Rotary inertia scale on the lumped mass rotation DOFs
ROTARY_INERTIA_FACTOR = 0.01


def beam_local_stiffness(EI: float, l: float) -> np.ndarray:
    """
    Classic 2-node Euler-Bernoulli beam stiffness.
    DOF order: [w1, theta1, w2, theta2]
    """
    if l <= 0.0:
        raise ValueError(f"Element length must be positive, got {l}")
    a = EI / l**3
    l2 = l * l

    k = np.array([
        [ 12*a,     6*l*a,  -12*a,     6*l*a],
        [ 6*l*a,   4*l2*a,  -6*l*a,   2*l2*a],
        [-12*a,    -6*l*a,   12*a,    -6*l*a],
        [ 6*l*a,   2*l2*a,  -6*l*a,   4*l2*a],
    ], dtype=float)
    return k


def beam_lumped_mass(
    m_line: float,
    l: float,
    rotary_factor: float = ROTARY_INERTIA_FACTOR
) -> np.ndarray:
    """
    Simplified lumped element mass (an approximation, not the consistent
    beam mass matrix).

    Each node gets half the element mass on w and a small rotary inertia
    rotary_factor * m_line * l^3 / 12 on theta. Off-diagonal terms are zero.
    Frequencies computed with this matrix are what the rest of the package
    is calibrated against, so it stays in this form.

    DOF order: [w1, theta1, w2, theta2]
    """
    mt = m_line * l / 2.0
    Ir = m_line * l**3 / 12.0 * rotary_factor
    return np.diag([mt, Ir, mt, Ir]).astype(float)
