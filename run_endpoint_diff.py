#!/usr/bin/env python
"""Compare two REST endpoints from the command line."""

import argparse
import logging
import sys
from pathlib import Path

from endpointdiff import ComparisonReporter, EndpointDiffError, EndpointDiffRunner


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare the values two REST endpoints return under a JSONPath",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_endpoint_diff.py config.yaml
  python run_endpoint_diff.py --verbose config.yaml
  python run_endpoint_diff.py -r report.json -q config.yaml
        """
    )

    parser.add_argument("config", help="Path to YAML/JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed comparison and request logs")
    parser.add_argument("-r", "--report", help="Path to output JSON report file")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress console output")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if not Path(args.config).exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        result = EndpointDiffRunner.run_config(args.config)
    except EndpointDiffError as e:
        print(f"Error during comparison: {e}", file=sys.stderr)
        return 1

    reporter = ComparisonReporter(verbose=args.verbose)
    if not args.quiet:
        reporter.print_report(result)

    if args.report:
        try:
            reporter.write_json(result, args.report)
        except OSError as e:
            print(f"Error: Could not write report {args.report}: {e}", file=sys.stderr)
            return 1
        if not args.quiet:
            print(f"\nReport saved to: {args.report}")

    # Return exit code
    return 0 if result.is_equivalent else 1


if __name__ == "__main__":
    sys.exit(main())
