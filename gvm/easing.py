"""
Easing curves for phase transitions.

Each function maps progress x in [0, 1] to an eased value. Inputs are
evaluated as-is (no clamping). Back curves overshoot between the
endpoints but still land on f(0) = 0 and f(1) = 1.

Pass a name or the function itself wherever an easing is accepted:

    clock.get_phase(8, 2, ease_fn="easeOutCubic")
    clock.get_phase(8, 2, ease_fn=easing.ease_out_cubic)
"""

import math
from typing import Callable, Union

EasingFn = Callable[[float], float]

# Overshoot constants for the back family
C1 = 1.70158
C2 = C1 * 1.525
C3 = C1 + 1


def linear(x: float) -> float:
    return x


# ============================================================================
# Sine
# ============================================================================

def ease_in_sine(x: float) -> float:
    return 1 - math.cos((x * math.pi) / 2)


def ease_out_sine(x: float) -> float:
    return math.sin((x * math.pi) / 2)


def ease_in_out_sine(x: float) -> float:
    return -(math.cos(math.pi * x) - 1) / 2


# ============================================================================
# Polynomial (quad, cubic, quart, quint)
# ============================================================================

def ease_in_quad(x: float) -> float:
    return x * x


def ease_out_quad(x: float) -> float:
    return 1 - (1 - x) * (1 - x)


def ease_in_out_quad(x: float) -> float:
    return 2 * x * x if x < 0.5 else 1 - (-2 * x + 2) ** 2 / 2


def ease_in_cubic(x: float) -> float:
    return x * x * x


def ease_out_cubic(x: float) -> float:
    return 1 - (1 - x) ** 3


def ease_in_out_cubic(x: float) -> float:
    return 4 * x * x * x if x < 0.5 else 1 - (-2 * x + 2) ** 3 / 2


def ease_in_quart(x: float) -> float:
    return x * x * x * x


def ease_out_quart(x: float) -> float:
    return 1 - (1 - x) ** 4


def ease_in_out_quart(x: float) -> float:
    return 8 * x * x * x * x if x < 0.5 else 1 - (-2 * x + 2) ** 4 / 2


def ease_in_quint(x: float) -> float:
    return x * x * x * x * x


def ease_out_quint(x: float) -> float:
    return 1 - (1 - x) ** 5


def ease_in_out_quint(x: float) -> float:
    return 16 * x * x * x * x * x if x < 0.5 else 1 - (-2 * x + 2) ** 5 / 2


# ============================================================================
# Exponential
# ============================================================================
# 2 ** (10x - 10) never reaches 0 exactly, so the endpoints are pinned.
# Near-misses (e.g. 1e-17) go through the raw formula.

def ease_in_expo(x: float) -> float:
    return 0.0 if x == 0 else 2 ** (10 * x - 10)


def ease_out_expo(x: float) -> float:
    return 1.0 if x == 1 else 1 - 2 ** (-10 * x)


def ease_in_out_expo(x: float) -> float:
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x < 0.5:
        return 2 ** (20 * x - 10) / 2
    return (2 - 2 ** (-20 * x + 10)) / 2


# ============================================================================
# Circular
# ============================================================================

def ease_in_circ(x: float) -> float:
    return 1 - math.sqrt(1 - x ** 2)


def ease_out_circ(x: float) -> float:
    return math.sqrt(1 - (x - 1) ** 2)


def ease_in_out_circ(x: float) -> float:
    if x < 0.5:
        return (1 - math.sqrt(1 - (2 * x) ** 2)) / 2
    return (math.sqrt(1 - (-2 * x + 2) ** 2) + 1) / 2


# ============================================================================
# Back (overshoot)
# ============================================================================

def ease_out_back(x: float) -> float:
    return 1 + C3 * (x - 1) ** 3 + C1 * (x - 1) ** 2


def ease_in_out_back(x: float) -> float:
    if x < 0.5:
        return ((2 * x) ** 2 * ((C2 + 1) * 2 * x - C2)) / 2
    return ((2 * x - 2) ** 2 * ((C2 + 1) * (x * 2 - 2) + C2) + 2) / 2


# ============================================================================
# Registry and lookup
# ============================================================================

EASING_FUNCTIONS: dict[str, EasingFn] = {
    "linear": linear,
    "easeInSine": ease_in_sine,
    "easeOutSine": ease_out_sine,
    "easeInOutSine": ease_in_out_sine,
    "easeInQuad": ease_in_quad,
    "easeOutQuad": ease_out_quad,
    "easeInOutQuad": ease_in_out_quad,
    "easeInCubic": ease_in_cubic,
    "easeOutCubic": ease_out_cubic,
    "easeInOutCubic": ease_in_out_cubic,
    "easeInQuart": ease_in_quart,
    "easeOutQuart": ease_out_quart,
    "easeInOutQuart": ease_in_out_quart,
    "easeInQuint": ease_in_quint,
    "easeOutQuint": ease_out_quint,
    "easeInOutQuint": ease_in_out_quint,
    "easeInExpo": ease_in_expo,
    "easeOutExpo": ease_out_expo,
    "easeInOutExpo": ease_in_out_expo,
    "easeInCirc": ease_in_circ,
    "easeOutCirc": ease_out_circ,
    "easeInOutCirc": ease_in_out_circ,
    "easeOutBack": ease_out_back,
    "easeInOutBack": ease_in_out_back,
}


def list_easing_names() -> list[str]:
    return list(EASING_FUNCTIONS)


def get_easing(shape: Union[str, EasingFn]) -> EasingFn:
    """
    Resolve an easing by name or pass a callable through unchanged.

    Raises:
        ValueError: If shape is an unknown name
    """
    if callable(shape):
        return shape
    if shape not in EASING_FUNCTIONS:
        available = ", ".join(EASING_FUNCTIONS)
        raise ValueError(f"Unknown easing '{shape}'. Available easings: {available}")
    return EASING_FUNCTIONS[shape]
