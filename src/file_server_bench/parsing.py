import argparse

from file_server_bench.constants import (
    DEFAULT_FILE_SIZE,
    DEFAULT_ITERATIONS,
    DEFAULT_TIMEOUT,
)
from file_server_bench.structs import TransferConfig
from file_server_bench.utils import parse_size


def size_argument(value: str) -> int:
    try:
        return parse_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-server-bench",
        description="Generate test files and benchmark uploads and downloads against a file server.",
    )

    # Generate mode arguments
    generate_group = parser.add_argument_group("Generate mode arguments")
    generate_group.add_argument(
        "-g", "--generate", metavar="FILE", help="Generates a file of specified size"
    )
    generate_group.add_argument(
        "--size",
        type=size_argument,
        default=DEFAULT_FILE_SIZE,
        help=f"Sets the file size for generation (e.g., '2048', '10MB'). "
        f"Accepts suffixes KB, MB, GB. Default: {DEFAULT_FILE_SIZE}",
    )
    generate_group.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible file content (default: random)",
    )

    # Transfer mode arguments
    transfer_group = parser.add_argument_group("Transfer mode arguments")
    transfer_group.add_argument(
        "-u", "--upload", metavar="FILE", help="Uploads the specified file"
    )
    transfer_group.add_argument(
        "-d", "--download", metavar="FILE", help="Downloads the specified file"
    )
    transfer_group.add_argument(
        "-c", "--chunked", action="store_true", help="Enables chunked download"
    )
    transfer_group.add_argument(
        "-s", "--server", metavar="URL", help="Sets the server URL"
    )
    transfer_group.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Specifies the HTTP request timeout for upload in seconds. Default: {DEFAULT_TIMEOUT}",
    )
    transfer_group.add_argument(
        "-i",
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"Specifies the number of iterations for upload/download. Default: {DEFAULT_ITERATIONS}",
    )
    transfer_group.add_argument(
        "--verify-tls",
        dest="verify_tls",
        action="store_true",
        default=False,
        help="Validate the server TLS certificate",
    )
    transfer_group.add_argument(
        "--insecure",
        dest="verify_tls",
        action="store_false",
        help="INSECURE: accept invalid or self-signed server certificates (default, for test servers only)",
    )
    transfer_group.add_argument(
        "--tsv",
        action="store_true",
        help="Print a TSV table of duration statistics at the end",
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = build_parser()
    return parser.parse_args(argv)


def transfer_config(args: argparse.Namespace) -> TransferConfig:
    """Build the transfer configuration from parsed arguments."""
    return TransferConfig(
        server_url=args.server,
        upload_file=args.upload,
        download_file=args.download,
        chunked=args.chunked,
        timeout=args.timeout,
        iterations=args.iterations,
        verify_tls=args.verify_tls,
    )
