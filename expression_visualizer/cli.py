#!/usr/bin/env python3
"""
Command line front end: visualize an expression or play its stepwise evaluation.
"""
import argparse
import asyncio
import sys
from typing import List, Optional

from .animation import StepAnimator
from .config import AnimationConfig, ParserConfig, EXAMPLE_EXPRESSIONS
from .exceptions import ExpressionError
from .expression_tree import Expression, process_expression
from .logging_system import LogLevel, configure_logging, get_logger

STEPS_HEADER = "Step-by-Step Evaluation (Postorder Traversal):"


def non_negative_float(text: str) -> float:
    """argparse type for --delay"""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not a number") from None
    if not value >= 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative number of seconds, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expression-visualizer",
        description="Build, print and evaluate the expression tree of an infix expression")
    parser.add_argument("expression", nargs="?", default=EXAMPLE_EXPRESSIONS[0],
                        help=f"Infix expression (default: {EXAMPLE_EXPRESSIONS[0]})")
    parser.add_argument("--steps", action="store_true",
                        help="Print the postorder evaluation trace instead of the summary")
    parser.add_argument("--delay", type=non_negative_float, default=0.0,
                        help="Seconds between steps when --steps is given (default: 0)")
    parser.add_argument("--strict", action="store_true",
                        help="Reject unbalanced brackets, unknown characters and leftover operands")
    parser.add_argument("--examples", action="store_true",
                        help="List the built-in example expressions and exit")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase log detail (-v pipeline stages, -vv debug)")
    parser.add_argument("--log-file", default=None, metavar="PATH",
                        help="Also write the log to PATH")
    return parser


def _log_level(verbosity: int) -> LogLevel:
    if verbosity >= 2:
        return LogLevel.VERBOSE
    if verbosity == 1:
        return LogLevel.DETAILED
    return LogLevel.MODERATE


def visualize(infix: str, config: ParserConfig) -> str:
    report = process_expression(infix, config)
    get_logger().result_summary({"postfix": report.postfix, "result": report.result})
    return report.format()


def play_steps(infix: str, config: ParserConfig, delay: float) -> None:
    expression = Expression.from_infix(infix, config)
    animation_config = AnimationConfig(step_delay=delay)
    print(STEPS_HEADER + "\n")

    def show(event):
        print(event.format_line(animation_config.indent), flush=True)

    animator = StepAnimator(show, animation_config)
    asyncio.run(animator.play(expression.root))
    print(f"\nResult: {expression.evaluate()}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(_log_level(args.verbose),
                      log_to_file=args.log_file is not None,
                      log_file_path=args.log_file)

    if args.examples:
        for example in EXAMPLE_EXPRESSIONS:
            print(example)
        return 0

    config = ParserConfig(strict=args.strict)
    try:
        if args.steps:
            play_steps(args.expression, config, args.delay)
        else:
            print(visualize(args.expression, config))
    except ExpressionError as e:
        get_logger().critical(str(e))
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
