# Static spine rating <-> bending stiffness EI
"""
SPINE: STATIC SPINE TO BENDING STIFFNESS
========================================

The static spine test (ATA/AMO convention) supports the shaft on a 28 inch
span and hangs a 1.94 lb (0.88 kg) weight at the center. The spine number
is the measured center deflection in thousandths of an inch:

    spine 500 -> delta = 0.500 in

For a simply supported beam with a center point load:

    delta = F * L^3 / (48 * EI)   =>   EI = F * L^3 / (48 * delta)

So spine is a deflection: a higher number is a weaker shaft and a lower EI.
The result is one effective EI for the whole shaft; taper and barrel
profiles are not represented.
"""

from .kernel.errors import InvalidParameter
from .units import G, INCH

SPINE_TEST_SPAN_IN = 28.0
SPINE_TEST_LOAD_KG = 0.88  # 1.94 lb


def _test_force_and_span(span_in: float, load_kg: float) -> tuple[float, float]:
    if not span_in > 0.0:
        raise InvalidParameter(f"Spine test span must be positive, got {span_in}")
    if not load_kg > 0.0:
        raise InvalidParameter(f"Spine test load must be positive, got {load_kg}")
    return load_kg * G, span_in * INCH


def spine_to_ei(
    spine: float,
    span_in: float = SPINE_TEST_SPAN_IN,
    load_kg: float = SPINE_TEST_LOAD_KG
) -> float:
    """
    Convert a static spine rating to an effective bending stiffness.

    Parameters:
    -----------
    spine : float
        Static spine (deflection in 1/1000 in), must be positive
    span_in : float
        Support span of the test (inches)
    load_kg : float
        Hanging test mass (kg)

    Returns:
    --------
    float
        EI in N·m²

    Examples:
    ---------
    >>> round(spine_to_ei(500), 2)
    5.09
    """
    if not spine > 0.0:
        raise InvalidParameter(f"Spine must be positive, got {spine}")
    F, L = _test_force_and_span(span_in, load_kg)
    delta = spine / 1000.0 * INCH
    return F * L**3 / (48.0 * delta)


def ei_to_spine(
    ei: float,
    span_in: float = SPINE_TEST_SPAN_IN,
    load_kg: float = SPINE_TEST_LOAD_KG
) -> float:
    """Inverse of spine_to_ei: the static spine a shaft of stiffness `ei` would test at."""
    if not ei > 0.0:
        raise InvalidParameter(f"EI must be positive, got {ei}")
    F, L = _test_force_and_span(span_in, load_kg)
    delta = F * L**3 / (48.0 * ei)
    return delta / INCH * 1000.0
