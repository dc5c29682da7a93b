"""Three-way directional labels with a spread-dependent deadband."""

from enum import Enum


class Label(str, Enum):
    """Direction of the mid price move over the horizon."""

    DOWN = "down"
    FLAT = "flat"
    UP = "up"


def deadband(rel_spread: float, eps_min: float, alpha: float, cost_bp: float) -> float:
    """eps = max(eps_min, alpha * rel_spread + cost_bp)"""
    return max(eps_min, alpha * rel_spread + cost_bp)


def classify(
    mid_now: float,
    mid_future: float,
    rel_spread_now: float,
    eps_min: float,
    alpha: float,
    cost_bp: float,
) -> Label:
    """Label the move from mid_now to mid_future.

    The return r = (mid_future - mid_now) / mid_now is compared against the
    deadband computed from the spread at time t.

    Returns:
        UP if r > eps, DOWN if r < -eps, otherwise FLAT.
    """
    r = (mid_future - mid_now) / max(mid_now, 1e-12)
    eps = deadband(rel_spread_now, eps_min, alpha, cost_bp)
    if r > eps:
        return Label.UP
    if r < -eps:
        return Label.DOWN
    return Label.FLAT
