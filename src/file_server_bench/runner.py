"""
File Server Bench

Repeatedly upload and/or download a file against a file server, verify
the downloaded content by SHA-256 and report average transfer times.
"""

import os
import time

import httpx

from file_server_bench.constants import OP_DOWNLOAD, OP_UPLOAD
from file_server_bench.errors import BenchmarkError, ConfigError
from file_server_bench.stats import DurationStats
from file_server_bench.structs import TransferConfig
from file_server_bench.transfer import TransferClient
from file_server_bench.utils import format_duration, format_size, log, log_error


def check_server_url(server_url: str):
    try:
        url = httpx.URL(server_url)
    except httpx.InvalidURL as e:
        raise ConfigError(f"Invalid server URL {server_url}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(
            f"Invalid server URL {server_url}: expected http(s)://host[:port]"
        )


def check_config(config: TransferConfig):
    """
    Validate a transfer configuration before any request is sent.

    Raises:
        ConfigError: A server URL is missing or invalid, or the iteration count
            is invalid
    """
    if config.server_url:
        check_server_url(config.server_url)
    if config.upload_file and not config.server_url:
        raise ConfigError("Server URL is required for uploading files.")
    if config.download_file and not config.server_url:
        raise ConfigError("Server URL is required for downloading files.")
    if config.iterations < 1:
        raise ConfigError(
            f"Number of iterations must be at least 1, got {config.iterations}."
        )


def run_upload(client: TransferClient, config: TransferConfig, stats: DurationStats):
    """Delete the remote copy, then upload the configured file and time it."""
    file_path = config.upload_file

    # Pre-cleanup; its outcome does not matter
    client.delete_quietly(os.path.basename(file_path))

    log(f"Start uploading file: {file_path}")
    start_time = time.perf_counter()
    try:
        result = client.upload(file_path, timeout=config.timeout)
    except BenchmarkError as e:
        log_error(f"Error uploading file {file_path}: {e}")
        return

    duration = time.perf_counter() - start_time
    stats.record(duration)
    log(
        f"{file_path}: Uploaded. Status: {result.status_code}\n"
        f"Time taken: {format_duration(duration)}"
    )


def run_download(
    client: TransferClient, config: TransferConfig, stats: DurationStats
):
    """Download the configured file, hash it and time it."""
    filename = config.download_file

    log(f"Start downloading file: {filename}")
    start_time = time.perf_counter()
    try:
        result = client.download(filename, chunked=config.chunked)
    except BenchmarkError as e:
        log_error(f"Error downloading file {filename}: {e}")
        return

    duration = time.perf_counter() - start_time
    stats.record(duration)
    log(
        f"{filename}: Downloaded chunked = {result.chunked} "
        f"Size = {result.size} bytes ({format_size(result.size)}) "
        f"SHA256: {result.digest}\n"
        f"Time taken: {format_duration(duration)}"
    )


def run_iterations(
    config: TransferConfig, client: TransferClient | None = None
) -> tuple[DurationStats, DurationStats]:
    """
    Run the configured upload and/or download the configured number of times.

    Failed calls are reported and left out of the statistics; every
    iteration runs regardless of earlier failures.

    Args:
        config: Transfer configuration
        client: Client to use, built from the configuration if omitted

    Returns:
        Tuple of (upload stats, download stats)

    Raises:
        ConfigError: The configuration is unusable; nothing was sent
    """
    check_config(config)

    upload_stats = DurationStats(OP_UPLOAD)
    download_stats = DurationStats(OP_DOWNLOAD)

    if not (config.upload_file or config.download_file):
        return upload_stats, download_stats

    if client is None:
        client = TransferClient(
            config.server_url,
            timeout=config.timeout,
            verify_tls=config.verify_tls,
        )

    for iteration in range(config.iterations):
        if config.iterations > 1:
            log(f"Iteration {iteration + 1}/{config.iterations}")

        if config.upload_file:
            run_upload(client, config, upload_stats)

        if config.download_file:
            run_download(client, config, download_stats)

    return upload_stats, download_stats


def print_averages(upload_stats: DurationStats, download_stats: DurationStats):
    """Print the average time of each operation kind that succeeded at least once."""
    if upload_stats:
        log(f"Average upload time: {format_duration(upload_stats.average)}")

    if download_stats:
        log(f"Average download time: {format_duration(download_stats.average)}")


def print_tsv_results(*all_stats: DurationStats):
    """
    Print duration statistics as a TSV table.

    Args:
        all_stats: DurationStats to include; empty ones are skipped
    """
    print("\nBenchmark Results (TSV format):")
    print("Operation\tSuccessful\tAverage (s)\tMin (s)\tMax (s)\tStd Dev (s)")

    for stats in all_stats:
        summary = stats.summary()
        if summary is None:
            continue
        print(
            f"{stats.operation}\t{summary.count}\t{summary.average:.4f}\t"
            f"{summary.minimum:.4f}\t{summary.maximum:.4f}\t{summary.std_deviation:.4f}"
        )
