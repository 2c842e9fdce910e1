"""Shared fixtures for the benchmark tests."""

import httpx
import pytest

from file_server_bench.transfer import TransferClient

SERVER_URL = "https://fake-server:8443"


class FakeFileServer:
    """In-memory file server speaking the upload/download/delete routes."""

    def __init__(self):
        self.files: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "POST" and path == "/upload":
            name, content = parse_single_file_part(request)
            self.files[name] = content
            return httpx.Response(200, text="File uploaded")

        if request.method == "GET":
            for prefix in ("/download/", "/download-chunked/"):
                if path.startswith(prefix):
                    name = path[len(prefix):]
                    if name not in self.files:
                        return httpx.Response(404, text="Not found")
                    return httpx.Response(200, content=self.files[name])

        if request.method == "DELETE":
            name = path.lstrip("/")
            if self.files.pop(name, None) is None:
                return httpx.Response(404, text="Not found")
            return httpx.Response(200, text="Deleted")

        return httpx.Response(405)

    def paths(self, method: str) -> list[str]:
        return [r.url.path for r in self.requests if r.method == method]


def parse_single_file_part(request: httpx.Request) -> tuple[str, bytes]:
    """Extract (filename, content) of the `file` part of a multipart body."""
    content_type = request.headers["content-type"]
    boundary = content_type.split("boundary=", 1)[1].encode()
    body = request.content

    part = body.split(b"--" + boundary)[1]
    headers, _, content = part.partition(b"\r\n\r\n")
    assert b'name="file"' in headers

    filename = headers.split(b'filename="', 1)[1].split(b'"', 1)[0].decode()
    return filename, content[: -len(b"\r\n")]


@pytest.fixture
def file_server() -> FakeFileServer:
    return FakeFileServer()


@pytest.fixture
def transfer_client(file_server: FakeFileServer) -> TransferClient:
    return TransferClient(
        SERVER_URL, transport=httpx.MockTransport(file_server.handler)
    )
