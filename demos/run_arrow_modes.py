import logging

import matplotlib.pyplot as plt

from arrow_fem import AnalysisParams, analyze
from arrow_fem.logging_config import setup_logging
from arrow_fem.post import modes_table
from arrow_fem.viz import plot_axial_profile, plot_mode_shapes


def main():
    setup_logging(logging.INFO)

    # 30" shaft, 500 spine, 14 g bare, 125 gr point, 8 gr nock,
    # 20 gr of fletching 2" from the nock, 75 m/s off a 0.7 m power stroke
    params = AnalysisParams(
        length_in=30.0,
        n_elements=24,
        spine=500.0,
        shaft_mass_g=14.0,
        tip_grains=125.0,
        nock_grains=8.0,
        fletching_grains=20.0,
        fletching_pos_in=2.0,
        velocity=75.0,
        power_stroke=0.7,
    )

    print("Running arrow modal analysis with params:", params)
    result = analyze(params)

    print(f"Estimated EI (N m^2): {result.ei:.3e}")
    print(f"Total mass (g): {result.masses.total_mass * 1000:.2f}")
    if result.axial is not None:
        print(f"Peak launch acceleration (m/s^2): {result.axial.acceleration:.1f}")
        print(f"Max axial compression (N): {result.axial.max_axial_force:.2f}")
        print(f"Stiffness factor (approximation): {result.axial.factor:.6f}")

    print("First modes:")
    for mode in result.modes:
        print(f"{mode.index}: freq = {mode.frequency:.2f} Hz, omega^2 = {mode.omega2:.3e}")

    for message in result.warnings:
        print("WARNING:", message)

    print()
    print(modes_table(result).to_string(index=False))

    plot_mode_shapes(result, n_modes=4)
    if result.axial is not None:
        plot_axial_profile(result)
    plt.show()


if __name__ == "__main__":
    main()
