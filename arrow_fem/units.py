# Unit conversion constants shared by the whole pipeline
"""
UNITS
=====

The analysis runs in SI (m, kg, s, N). Archery inputs arrive in inches,
grams and grains, so every conversion goes through the constants here.
"""

INCH = 0.0254          # m
LB = 0.45359237        # kg
GRAIN = LB / 7000      # kg
GRAM = 1.0e-3          # kg
G = 9.80665            # m/s^2


def inches_to_m(value: float) -> float:
    return value * INCH


def grains_to_kg(value: float) -> float:
    return value * GRAIN


def grams_to_kg(value: float) -> float:
    return value * GRAM
