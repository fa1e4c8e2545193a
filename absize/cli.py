from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .errors import SampleSizeError
from .power import (
    CalculationInput,
    Sidedness,
    duration_days,
    required_sample_size,
    sample_size_table,
)
from .utils import fmt_count, fmt_float, fmt_pct, result_lines

LOGGER = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 2


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def _sidedness(text: str) -> Sidedness:
    try:
        return Sidedness.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="absize", description="Sample size for a two-proportion A/B test.")
    ap.add_argument("--bcr", type=float, default=5.0, help="Baseline conversion rate in percent")
    ap.add_argument("--mde", type=float, default=30.0, help="Relative minimum detectable effect in percent")
    ap.add_argument("--alpha", type=float, default=0.05, help="Significance level")
    ap.add_argument("--power", type=float, default=0.8, help="Statistical power")
    sided = ap.add_mutually_exclusive_group()
    sided.add_argument("--sided", type=_sidedness, metavar="{one-sided,two-sided}")
    sided.add_argument("--two-sided", dest="sided", action="store_const", const=Sidedness.TWO_SIDED)
    sided.add_argument("--one-sided", dest="sided", action="store_const", const=Sidedness.ONE_SIDED)
    ap.set_defaults(sided=Sidedness.TWO_SIDED)
    ap.add_argument("--split", type=float, default=0.5, help="Share of traffic sent to the test group")
    ap.add_argument("--daily-traffic", type=_positive_int, default=None, help="Units entering the experiment per day")
    ap.add_argument("--table", type=float, nargs="+", metavar="MDE", help="Print sizes for several MDEs")
    ap.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    ap.add_argument("--log-level", default="WARNING", help="Root logging level")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    inp = CalculationInput(
        bcr=args.bcr,
        mde=args.mde,
        alpha=args.alpha,
        power=args.power,
        sided=args.sided,
        split_ratio=args.split,
    )
    LOGGER.debug("Calculating with %s", inp)

    try:
        if args.table:
            table = sample_size_table(inp.bcr, args.table, inp.alpha, inp.power, inp.sided, inp.split_ratio)
        else:
            res = required_sample_size(inp)
    except SampleSizeError as e:
        LOGGER.warning("Invalid input: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        if not args.json and not args.table:
            print("\n".join(result_lines(None)))
        return EXIT_INPUT_ERROR

    if args.table:
        if args.daily_traffic is not None:
            table["duration_days"] = [duration_days(int(n), args.daily_traffic) for n in table["total_size"]]
        if args.json:
            print(table.to_json(orient="records"))
        else:
            print(table.to_string(index=False, formatters={"p_test": fmt_pct}))
        return 0

    days = duration_days(res.total_size, args.daily_traffic) if args.daily_traffic is not None else None

    if args.json:
        out = res.as_dict()
        if days is not None:
            out["duration_days"] = days
        print(json.dumps(out))
        return 0

    print(
        f"Inputs: bcr={args.bcr:g}%, mde={args.mde:g}%, alpha={args.alpha:g}, "
        f"power={args.power:g}, {inp.sided.value}, split={fmt_pct(args.split, 0)} test"
    )
    print("\n".join(result_lines(res)))
    if days is not None:
        print(f"Duration:          {fmt_float(days, 1)} days at {fmt_count(args.daily_traffic)}/day")
    return 0


if __name__ == "__main__":
    sys.exit(main())
