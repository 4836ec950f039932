from typing import Tuple, Union

import numpy as np
from plotly.colors import find_intermediate_color, hex_to_rgb, label_rgb

# marker radius is RADIUS_K * sqrt(population / RADIUS_REFERENCE)
RADIUS_K: float = 6.0
RADIUS_REFERENCE: float = 1_000_000

POPULATION_DOMAIN: Tuple[float, float] = (1_000_000, 3_500_000)
COLOR_LOW: str = "#FFB3BA"
COLOR_HIGH: str = "#FF6B6B"

ORIGIN_RADIUS: float = 4.0
ORIGIN_COLOR: str = "#4CAF50"

Number = Union[int, float, np.ndarray]


def radius(population: Number, k: float = RADIUS_K, reference: float = RADIUS_REFERENCE) -> Number:
    return k * np.sqrt(np.asarray(population, dtype=float) / reference)


def color_position(
    population: float, domain: Tuple[float, float] = POPULATION_DOMAIN
) -> float:
    """position of population inside domain, clamped to [0, 1]"""
    lo, hi = domain
    return float(np.clip((population - lo) / (hi - lo), 0.0, 1.0))


def color(
    population: float,
    low: str = COLOR_LOW,
    high: str = COLOR_HIGH,
    domain: Tuple[float, float] = POPULATION_DOMAIN,
) -> str:
    """
    linear rgb interpolation between low and high over domain. returns an
    "rgb(r, g, b)" string with channels rounded half up.
    """
    _rgb = find_intermediate_color(
        hex_to_rgb(low),
        hex_to_rgb(high),
        color_position(population, domain),
        colortype="tuple",
    )
    _channels = tuple(int(np.floor(c + 0.5)) for c in _rgb)

    return label_rgb(_channels)
