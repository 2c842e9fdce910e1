from typing import NamedTuple

from file_server_bench.constants import DEFAULT_ITERATIONS, DEFAULT_TIMEOUT


class TransferConfig(NamedTuple):
    server_url: str | None = None
    upload_file: str | None = None
    download_file: str | None = None
    chunked: bool = False
    timeout: float = DEFAULT_TIMEOUT
    iterations: int = DEFAULT_ITERATIONS
    verify_tls: bool = False


class UploadResult(NamedTuple):
    filename: str
    status_code: int


class DownloadResult(NamedTuple):
    filename: str
    chunked: bool
    size: int
    digest: str


class SummaryStats(NamedTuple):
    count: int
    average: float
    minimum: float
    maximum: float
    std_deviation: float
