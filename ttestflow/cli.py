"""
Command-line entry point.

    ttestflow crabs.csv --value weight --group site --welch --plot means.png

Prints the workflow report and optionally writes the mean/SE figure and
the residual QQ plot.
"""

from __future__ import annotations

import argparse
import json
import sys

from ttestflow import __version__
from ttestflow.core.datasource import DataSource
from ttestflow.core.exceptions import TTestFlowError
from ttestflow.hypothesis._common import VALID_ALTERNATIVES
from ttestflow.workflow import analyze


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ttestflow",
        description="t-test with residual normality diagnostics",
    )
    parser.add_argument("data", help="CSV or TSV file with named columns")
    parser.add_argument("--value", required=True, help="numeric measurement column")
    parser.add_argument("--group", help="two-level grouping column (long format)")
    parser.add_argument("--second", help="second measurement column (wide format)")
    parser.add_argument("--id", dest="ids", help="identifier column for pairing by individual")
    parser.add_argument("--paired", action="store_true", help="paired t-test")
    parser.add_argument(
        "--welch", action="store_true",
        help="do not assume equal variances (Welch correction)",
    )
    parser.add_argument(
        "--alternative", choices=VALID_ALTERNATIVES, default="two-sided",
    )
    parser.add_argument("--mu", type=float, default=0.0, help="null mean or difference")
    parser.add_argument("--conf-level", type=float, default=0.95)
    parser.add_argument("--plot", metavar="PATH", help="write the mean/SE figure here")
    parser.add_argument("--overlay", action="store_true", help="overlay raw data on the mean/SE figure")
    parser.add_argument("--qq", metavar="PATH", help="write the residual QQ plot here")
    parser.add_argument("--json", action="store_true", help="print the numeric results as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        ds = DataSource.from_file(args.data)
        report = analyze(
            ds,
            args.value,
            group=args.group,
            second=args.second,
            ids=args.ids,
            paired=args.paired,
            equal_variance=not args.welch,
            alternative=args.alternative,
            null_mean=args.mu,
            confidence_level=args.conf_level,
        )
    except (TTestFlowError, FileNotFoundError, KeyError) as e:
        print(f"ttestflow: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.summary())

    if args.plot or args.qq:
        try:
            _write_figures(report, ds, args)
        except (TTestFlowError, OSError) as e:
            print(f"ttestflow: error: cannot write figure: {e}", file=sys.stderr)
            return 2
    return 0


def _write_figures(report, ds: DataSource, args: argparse.Namespace) -> None:
    from ttestflow.plotting import mean_se_plot, qq_plot

    if args.plot:
        if args.group:
            fig = mean_se_plot(
                ds.numeric(args.value), ds.labels(args.group),
                overlay=args.overlay, ylabel=args.value,
            )
        elif args.second:
            fig = mean_se_plot(
                list(ds.numeric(args.value)) + list(ds.numeric(args.second)),
                [args.value] * ds.n_observations + [args.second] * ds.n_observations,
                overlay=args.overlay,
            )
        else:
            fig = mean_se_plot(ds.numeric(args.value), overlay=args.overlay, ylabel=args.value)
        _save(fig, args.plot)

    if args.qq:
        _save(qq_plot(report.normality), args.qq)


def _save(fig, path: str) -> None:
    import matplotlib.pyplot as plt

    try:
        fig.savefig(path, bbox_inches="tight")
    finally:
        plt.close(fig)


if __name__ == "__main__":
    sys.exit(main())
