"""Hit counters and pi derivations for the three Monte Carlo methods."""

import math

from .prng import MASK32, XorShift32

# Quarter-circle radius squared for integer coordinates in [0, 2^32 - 1]
RADIUS_SQUARED = MASK32 * MASK32


def _check_trials(trials: int) -> None:
    if trials < 0:
        raise ValueError(f"trials must be non-negative, received {trials}")


def circle_count(trials: int, rng: XorShift32) -> int:
    """Count integer points landing inside the quarter circle."""
    _check_trials(trials)
    hits = 0
    for _ in range(trials):
        x = rng.next_u32()
        y = rng.next_u32()
        # exact comparison, the sum may exceed 64 bits
        if x * x + y * y <= RADIUS_SQUARED:
            hits += 1
    return hits


def coprime_count(trials: int, rng: XorShift32) -> int:
    """Count pairs of odd 32-bit integers whose gcd is 1."""
    _check_trials(trials)
    hits = 0
    for _ in range(trials):
        a = rng.next_u32() | 1
        b = rng.next_u32() | 1
        if math.gcd(a, b) == 1:
            hits += 1
    return hits


def needle_half_projection(theta: float) -> float:
    """Half the needle's projection across the lines (l = 1)."""
    return 0.5 * math.sin(theta)


def buffon_count(trials: int, rng: XorShift32) -> int:
    """Count Buffon needle drops that cross a line (t = 1, l = 1).

    Only a quarter of the problem space is sampled: the centre distance to the
    nearest line lies in [0, 0.5) and the angle in [0, pi/2).
    """
    _check_trials(trials)
    crosses = 0
    for _ in range(trials):
        y = rng.next_double() * 0.5
        theta = rng.next_double() * (math.pi / 2.0)
        if y <= needle_half_projection(theta):
            crosses += 1
    return crosses


def hit_probability(hits: int, trials: int) -> float:
    """Observed success ratio; an empty run reports 0.0."""
    if trials == 0:
        return 0.0
    return hits / trials


def pi_from_circle_probability(p: float) -> float:
    # quarter circle covers pi/4 of the square
    return 4.0 * p


def pi_from_coprime_probability(p: float) -> float:
    # P(gcd == 1) = 6 / pi^2
    if p <= 0.0:
        return 0.0
    return math.sqrt(6.0 / p)


def pi_from_needle_probability(p: float) -> float:
    # P = 2L / (pi * T) = 2 / pi
    if p <= 0.0:
        return 0.0
    return 2.0 / p
