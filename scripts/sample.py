"""Command line harness for seedgen sampling runs."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "sample_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from seedgen import SampleConfig, ValidationError, run_sample
from seedgen.sample import BUILDERS


def _parse_weights(value: str) -> tuple[float, ...]:
    """Parse a CLI `0.1,0.2,0.7` style option into a tuple of weights."""

    if not value or not value.strip():
        raise argparse.ArgumentTypeError("Distribution cannot be empty.")

    try:
        weights = tuple(float(part.strip()) for part in value.split(",") if part.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Distribution must contain numbers.") from exc

    if any(weight < 0 for weight in weights):
        raise argparse.ArgumentTypeError("Distribution weights must not be negative.")

    return weights


def _parse_bool(value: str) -> bool:
    """Accept a variety of truthy / falsy CLI inputs."""

    if isinstance(value, bool):
        return value

    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise argparse.ArgumentTypeError(
        "Expected a boolean value (true/false). Received: %s" % value
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw deterministic values from a seedgen generator")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=1357954837,
        help="Starting seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--size", type=int, default=10, help="Number of values to draw")
    parser.add_argument(
        "--kind",
        choices=sorted(BUILDERS),
        default="integer",
        help="Generator to sample from",
    )
    parser.add_argument(
        "--min",
        type=float,
        help="Lower bound (or minimum length for strings); not accepted by char",
    )
    parser.add_argument(
        "--max",
        type=float,
        help="Upper bound, maximum length for strings, or index count for uniform/sized",
    )
    parser.add_argument("--bias", type=float, help="Value the numeric draws lean toward")
    parser.add_argument(
        "--influence",
        type=float,
        help="Strength of the bias between 0 and 1; required together with --bias",
    )
    parser.add_argument(
        "--distribution",
        type=_parse_weights,
        default=(),
        help="Comma-separated weights for the sized kind (e.g. 0.1,0.2,0.7)",
    )
    parser.add_argument(
        "--unchecked",
        type=_parse_bool,
        default=False,
        help="Skip option validation for numeric kinds",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "sample_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = SampleConfig(
        seed=args.seed,
        size=args.size,
        kind=args.kind,
        min=args.min,
        max=args.max,
        bias=args.bias,
        influence=args.influence,
        distribution=args.distribution,
        unchecked=args.unchecked,
    )

    try:
        result = run_sample(cfg)
    except ValidationError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
