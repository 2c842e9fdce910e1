import os
import time

import httpx

from file_server_bench.constants import (
    DEFAULT_TIMEOUT,
    DOWNLOAD_CHUNKED_ENDPOINT,
    DOWNLOAD_ENDPOINT,
    UPLOAD_ENDPOINT,
)
from file_server_bench.errors import ResponseReadError, TransportError
from file_server_bench.structs import DownloadResult, UploadResult
from file_server_bench.utils import sha256_hexdigest

# httpx.InvalidURL is not an httpx.HTTPError
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def describe_http_error(exc: Exception) -> str:
    """Build a readable message from an httpx error, including the status when known."""
    message = str(exc) or exc.__class__.__name__
    if isinstance(exc, httpx.HTTPStatusError):
        message = f"Status code: {exc.response.status_code} ({exc.request.url})"
    return message


class Deadline:
    """Total time budget of one request, from sending it to the last body byte."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        self.expires_at = time.monotonic() + timeout

    def check(self, url):
        if time.monotonic() > self.expires_at:
            raise TransportError(f"Request to {url} timed out after {self.timeout}s")


class TransferClient:
    """Upload, download and delete files on a single file server."""

    def __init__(
        self,
        server_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_tls: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client for one server.

        Args:
            server_url: Base URL of the file server (e.g. https://host:8443)
            timeout: Upload timeout in seconds
            verify_tls: Validate the server certificate. Off by default so
                self-signed test servers can be benchmarked.
            transport: Optional httpx transport, used instead of the network
        """
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.transport = transport

    def client_kwargs(self, timeout: float) -> dict:
        return {
            "verify": self.verify_tls,
            "timeout": httpx.Timeout(timeout),
            "follow_redirects": True,
            "transport": self.transport,
        }

    def open_client(self, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
        """Create a fresh httpx client; one is used per request."""
        return httpx.Client(**self.client_kwargs(timeout))

    def send(self, method: str, url: str, timeout: float, **kwargs) -> tuple[int, bytes]:
        """
        Send one request and read its body within a total deadline.

        httpx timeouts bound each connect, read and write separately, so a
        response that keeps trickling in is cut off here once `timeout`
        seconds have passed since the request started.

        Args:
            method: HTTP method
            url: Request URL
            timeout: Total time allowed for the request, in seconds
            kwargs: Passed on to httpx.Client.stream

        Returns:
            Tuple of (status code, response body)

        Raises:
            TransportError: The request failed, returned an error status
                (only when raise_for_status is requested) or timed out
            ResponseReadError: The response body could not be read
        """
        raise_for_status = kwargs.pop("raise_for_status", False)
        deadline = Deadline(timeout)
        buffer = bytearray()

        try:
            with self.open_client(timeout) as client:
                with client.stream(method, url, **kwargs) as response:
                    if raise_for_status:
                        response.raise_for_status()
                    deadline.check(url)
                    try:
                        for chunk in response.iter_bytes():
                            buffer.extend(chunk)
                            deadline.check(url)
                    except httpx.HTTPError as exc:
                        raise ResponseReadError(
                            f"Error reading response body: {describe_http_error(exc)}"
                        ) from exc
        except REQUEST_ERRORS as exc:
            raise TransportError(describe_http_error(exc)) from exc

        return response.status_code, bytes(buffer)

    def upload(self, file_path, timeout: float | None = None) -> UploadResult:
        """
        Upload a file as the `file` part of a multipart/form-data POST.

        Args:
            file_path: Local file to upload
            timeout: Request timeout in seconds, defaults to the client timeout

        Returns:
            UploadResult with the response status code

        Raises:
            TransportError: The file cannot be read or the request failed
        """
        url = f"{self.server_url}/{UPLOAD_ENDPOINT}"
        filename = os.path.basename(file_path)
        timeout = self.timeout if timeout is None else timeout

        try:
            with open(file_path, "rb") as f:
                status_code, _ = self.send(
                    "POST", url, timeout, files={"file": (filename, f)}
                )
        except OSError as exc:
            raise TransportError(f"Cannot read {file_path}: {exc}") from exc
        except ResponseReadError as exc:
            raise TransportError(str(exc)) from exc

        return UploadResult(filename=filename, status_code=status_code)

    def download(self, filename: str, chunked: bool = False) -> DownloadResult:
        """
        Download a file into memory and hash it.

        The chunked flag only selects the server endpoint; httpx reassembles
        chunked transfer encoding itself.

        Args:
            filename: Name of the file on the server
            chunked: Use the chunked download endpoint

        Returns:
            DownloadResult with the body size and SHA-256 digest

        Raises:
            TransportError: The request failed, returned an error status or
                timed out
            ResponseReadError: The response body could not be read
        """
        endpoint = DOWNLOAD_CHUNKED_ENDPOINT if chunked else DOWNLOAD_ENDPOINT
        url = f"{self.server_url}/{endpoint}/{filename}"

        _, body = self.send("GET", url, DEFAULT_TIMEOUT, raise_for_status=True)

        return DownloadResult(
            filename=filename,
            chunked=chunked,
            size=len(body),
            digest=sha256_hexdigest(body),
        )

    def delete(self, filename: str) -> int:
        """
        Delete a file on the server.

        The filename is appended to the server URL as given.

        Returns:
            Response status code

        Raises:
            TransportError: The request failed
        """
        url = f"{self.server_url}/{filename}"
        try:
            status_code, _ = self.send("DELETE", url, DEFAULT_TIMEOUT)
        except ResponseReadError as exc:
            raise TransportError(str(exc)) from exc

        return status_code

    def delete_quietly(self, filename: str) -> None:
        """Best-effort delete; the outcome is discarded."""
        try:
            self.delete(filename)
        except TransportError:
            pass
