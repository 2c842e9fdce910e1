"""File server upload/download benchmark tool."""

import sys

from file_server_bench.cli import cli


def main():
    try:
        cli()
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)
