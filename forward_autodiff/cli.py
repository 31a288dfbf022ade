"""Command line entry point: tabulate the demo expression."""

import argparse
import sys
from typing import Optional, Sequence

from .driver import build_demo_expression, tabulate, render_table
from .expression_tree import ExpressionValidator
from .logging_system import LogLevel, configure_logging, log_milestone
from .sampling import SamplingConfig, sample_points


def build_parser() -> argparse.ArgumentParser:
    defaults = SamplingConfig()
    parser = argparse.ArgumentParser(
        prog="forward-autodiff",
        description="Evaluate sin(sqrt(exp(x) + x^2) / 2) and its derivative over a range"
    )
    parser.add_argument("--start", type=float, default=defaults.start, help="First sample point")
    parser.add_argument("--stop", type=float, default=defaults.stop, help="Last sample point (inclusive)")
    parser.add_argument("--step", type=float, default=defaults.step, help="Distance between samples")
    parser.add_argument("--precision", type=int, default=6, help="Significant digits in the output")
    parser.add_argument("--verify", action="store_true",
                        help="Cross-check derivatives against a sympy reference")
    parser.add_argument("--log-level", default="MINIMAL", type=str.upper,
                        choices=[level.name for level in LogLevel], help="Logging verbosity")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(
        log_level=LogLevel[args.log_level],
        log_to_file=args.log_file is not None,
        log_file_path=args.log_file
    )

    config = SamplingConfig(start=args.start, stop=args.stop, step=args.step)
    try:
        config.validate()
        if args.precision < 1:
            raise ValueError(f"precision must be at least 1, got {args.precision}")
    except ValueError as e:
        logger.critical(str(e))
        parser.error(str(e))

    expression = build_demo_expression()
    points = sample_points(config)
    table = tabulate(expression, points)
    sys.stdout.write(render_table(table, precision=args.precision))

    if args.verify:
        check = ExpressionValidator.check_derivative(expression.root, points, rtol=1e-6, atol=1e-9)
        logger.result_summary({
            "samples": len(table),
            "max_abs_error": check.max_abs_error,
            "verified": check.passed,
        })
        if not check.passed:
            logger.critical("Forward-mode derivatives disagree with the sympy reference")
            return 1

    log_milestone("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
