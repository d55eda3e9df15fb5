"""Public package surface for the deterministic Monte Carlo pi estimators."""

from .estimators import buffon_count, circle_count, coprime_count
from .models import MethodReport, TrialResult
from .prng import XorShift32
from .sim import SAMPLE_SIZES, SimConfig, format_report, run_pi_sim

__all__ = [
    "MethodReport",
    "SAMPLE_SIZES",
    "SimConfig",
    "TrialResult",
    "XorShift32",
    "buffon_count",
    "circle_count",
    "coprime_count",
    "format_report",
    "run_pi_sim",
]
