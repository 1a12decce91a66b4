"""
VISUALIZATION: MODE SHAPES AND LAUNCH COMPRESSION
=================================================

Two plots:
- plot_mode_shapes: normalized transverse displacement w(x) of the lowest
  modes along the shaft, nock at x = 0 (clamped), tip on the right.
- plot_axial_profile: compressive force P(x) from the axial stiffening
  estimate, when that stage ran.

Both return the matplotlib Figure and optionally save it.
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from .post import nodal_displacements, normalize_shape

COLORS = {
    'structure_primary': '#2C3E50',
    'grid': '#BDC3C7',
    'point_mass': '#E74C3C',
    'compression': '#C0392B',
}


def _node_x(result) -> np.ndarray:
    return np.array([n.x for n in result.shaft.nodes().values()])


def plot_mode_shapes(
    result,
    n_modes: Optional[int] = None,
    save_path: Optional[str] = None,
    ax=None
):
    """
    Plot normalized mode shapes of an AnalysisResult.

    Parameters:
    -----------
    result : AnalysisResult
    n_modes : int, optional
        How many modes to draw (default: all returned)
    save_path : str, optional
        If provided, save the figure here
    ax : matplotlib Axes, optional
        Draw into an existing axes instead of a new figure
    """
    modes = result.modes if n_modes is None else result.modes[:n_modes]
    x = _node_x(result)

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    ax.axhline(0.0, color=COLORS['grid'], linewidth=1.0)
    for mode in modes:
        w, _ = nodal_displacements(normalize_shape(mode.shape))
        ax.plot(x, w, marker='o', markersize=3,
                label=f"Mode {mode.index}: {mode.frequency:.1f} Hz")

    for pm in result.point_masses:
        xp = min(max(pm.position, 0.0), result.shaft.length)
        ax.axvline(xp, color=COLORS['point_mass'], linestyle=':', linewidth=1.0)

    ax.set_xlabel("x from nock (m)")
    ax.set_ylabel("normalized w")
    ax.set_title(f"Mode shapes (EI = {result.ei:.3f} N·m²)")
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, color=COLORS['grid'], alpha=0.4)

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
    return fig


def plot_axial_profile(result, save_path: Optional[str] = None):
    """
    Plot the launch compression P(x). Raises ValueError if the axial
    stage did not run for this result.
    """
    if result.axial is None:
        raise ValueError("No axial stiffening estimate: give velocity and power_stroke")

    x = _node_x(result)
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.step(x, result.axial.axial_forces, where='post', color=COLORS['compression'])
    ax.set_xlabel("x from nock (m)")
    ax.set_ylabel("P (N)")
    ax.set_title(
        f"Launch compression: a = {result.axial.acceleration:.0f} m/s², "
        f"stiffness factor {result.axial.factor:.5f}"
    )
    ax.grid(True, color=COLORS['grid'], alpha=0.4)

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
    return fig
