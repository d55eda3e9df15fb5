"""Command line harness for the deterministic Monte Carlo pi run."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "simulation_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from pi_sim import SimConfig, format_report, run_pi_sim
from pi_sim.prng import DEFAULT_SEED, MASK32


def _parse_seed(value: str) -> int:
    """Parse a decimal or 0x-prefixed seed that fits in 32 bits."""

    try:
        seed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x hex). Received: {value}"
        ) from exc

    if not 0 <= seed <= MASK32:
        raise argparse.ArgumentTypeError(
            f"Seed must fit in an unsigned 32-bit integer. Received: {value}"
        )
    return seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate pi with three deterministic Monte Carlo methods")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=DEFAULT_SEED,
        help="Generator seed (accepts decimal or 0x-prefixed hex, 0 maps to 0x92D68CA2)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON payload instead of the text report",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "simulation_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Emit per-sample debug logging on stderr")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    result = run_pi_sim(SimConfig(seed=args.seed))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logging.getLogger(__name__).info("Report written to %s", log_path)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        sys.stdout.write(format_report(result))


if __name__ == "__main__":
    main()
