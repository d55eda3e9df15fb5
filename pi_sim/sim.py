"""Deterministic driver running every pi estimator over the fixed sample sizes."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List

from .estimators import (
    buffon_count,
    circle_count,
    coprime_count,
    hit_probability,
    pi_from_circle_probability,
    pi_from_coprime_probability,
    pi_from_needle_probability,
)
from .models import MethodReport, TrialResult
from .prng import DEFAULT_SEED, XorShift32

logger = logging.getLogger(__name__)

SAMPLE_SIZES: tuple[int, ...] = (100, 1000, 10000, 100000)


@dataclass
class SimConfig:
    """Configuration for a full three-method run."""

    seed: int = DEFAULT_SEED
    sample_sizes: tuple[int, ...] = SAMPLE_SIZES


@dataclass(frozen=True)
class _Method:
    key: str
    title: str
    count_label: str
    count_width: int
    show_probability: bool
    count: Callable[[int, XorShift32], int]
    to_pi: Callable[[float], float]


# Order matters: all three share one generator stream.
METHODS = (
    _Method(
        key="circle",
        title="Method 1: Quarter-circle inside unit square (integer arithmetic, no floats)",
        count_label="hits",
        count_width=8,
        show_probability=False,
        count=circle_count,
        to_pi=pi_from_circle_probability,
    ),
    _Method(
        key="coprime",
        title="Method 2: Probability that two integers are coprime (gcd==1)",
        count_label="coprime",
        count_width=6,
        show_probability=True,
        count=coprime_count,
        to_pi=pi_from_coprime_probability,
    ),
    _Method(
        key="needle",
        title="Method 3: Buffon's needle (l=1, t=1)",
        count_label="crosses",
        count_width=6,
        show_probability=True,
        count=buffon_count,
        to_pi=pi_from_needle_probability,
    ),
)


def _run_method(method: _Method, sizes: tuple[int, ...], rng: XorShift32) -> MethodReport:
    report = MethodReport(
        key=method.key,
        title=method.title,
        count_label=method.count_label,
        count_width=method.count_width,
        show_probability=method.show_probability,
    )
    for trials in sizes:
        hits = method.count(trials, rng)
        p = hit_probability(hits, trials)
        pi_est = method.to_pi(p)
        logger.debug("%s N=%d hits=%d p=%g pi_est=%g", method.key, trials, hits, p, pi_est)
        report.results.append(
            TrialResult(
                method=method.key,
                trials=trials,
                hits=hits,
                probability=p,
                pi_estimate=pi_est,
            )
        )
    logger.info("%s finished %d sample sizes", method.key, len(sizes))
    return report


def run_pi_sim(cfg: SimConfig) -> Dict[str, Any]:
    """Run circle, coprime and needle methods in sequence on one seeded generator."""

    rng = XorShift32(cfg.seed)
    methods: List[MethodReport] = [
        _run_method(method, cfg.sample_sizes, rng) for method in METHODS
    ]
    return {
        "config": asdict(cfg),
        "methods": [asdict(report) for report in methods],
    }


def format_report(result: Dict[str, Any]) -> str:
    """Render the run as the fixed-width text report."""

    lines: List[str] = []
    for method in result["methods"]:
        lines.append(method["title"])
        for entry in method["results"]:
            line = f"  N={entry['trials']:>6}  {method['count_label']}={entry['hits']:>{method['count_width']}}"
            if method["show_probability"]:
                line += f"  p={entry['probability']:g}"
            line += f"  pi_est={entry['pi_estimate']:g}"
            lines.append(line)
        lines.append("")
    return "\n".join(lines) + "\n"


if __name__ == "__main__":
    print(format_report(run_pi_sim(SimConfig())), end="")
