"""
Quotacast CLI: command-line interface for quota forecasting.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from quotacast.estimation.cost_model import load_cost_model
from quotacast.forecaster import QuotaForecaster
from quotacast.ingestion import run_forecast_on_file


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 1 on errors (or warnings with --strict)
    """
    parser = argparse.ArgumentParser(
        description="Quotacast: compare naive, optimized and zero-based workflow costs"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log estimation details to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # forecast command
    forecast_parser = subparsers.add_parser(
        "forecast", help="Forecast consumption and recommend an approach"
    )
    forecast_parser.add_argument("path", help="Path to a YAML or JSON request file")
    forecast_parser.add_argument(
        "--cost-model",
        help="Cost model YAML file path (default: request's cost_model or built-in)",
    )
    forecast_parser.add_argument(
        "--output",
        help="Output JSON file path (default: print to stdout)",
    )
    forecast_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when warnings are present",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "forecast":
        return _run_forecast(args.path, args.cost_model, args.output, args.strict)
    else:
        parser.print_help()
        return 1


def _run_forecast(
    path: str, cost_model: str | None, output: str | None, strict: bool
) -> int:
    """
    Run the forecast command.

    Args:
        path: Request file path
        cost_model: Optional cost model file path; overrides the request's own
        output: Optional output file path (None = stdout)
        strict: Treat warnings as failure

    Returns:
        Exit code: 0 on success, 1 on errors (or warnings when strict)
    """
    try:
        if not Path(path).exists():
            print(f"Error: Path does not exist: {path}", file=sys.stderr)
            return 1

        forecaster = None
        if cost_model:
            forecaster = QuotaForecaster(load_cost_model(cost_model))

        report, warnings = run_forecast_on_file(path, forecaster)

        output_json = json.dumps(report, indent=2, sort_keys=True)

        if output:
            Path(output).write_text(output_json, encoding="utf-8")
        else:
            print(output_json)

        for warning in warnings:
            print(f"Warning: {warning}", file=sys.stderr)

        if warnings and strict:
            return 1
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
