import sys

from file_server_bench.errors import ConfigError
from file_server_bench.generate import generate_random_text_file
from file_server_bench.runner import print_averages, print_tsv_results, run_iterations
from file_server_bench.parsing import parse_arguments, transfer_config
from file_server_bench.utils import log_error


def cli(argv=None):
    """Main entry point for the benchmark tool."""
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print("No arguments provided. Use --help for usage information.")
        return

    # Parse command line arguments
    args = parse_arguments(argv)

    if args.generate:
        generate(args)
    else:
        transfer(args)


def generate(args):
    """Generate a test file and print its digest."""
    try:
        digest = generate_random_text_file(args.generate, args.size, seed=args.seed)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"SHA256: {digest}")


def transfer(args):
    """Run the upload/download iterations and print average times."""
    config = transfer_config(args)

    try:
        upload_stats, download_stats = run_iterations(config)
    except ConfigError as e:
        log_error(str(e))
        sys.exit(1)

    print_averages(upload_stats, download_stats)

    if args.tsv:
        print_tsv_results(upload_stats, download_stats)
