"""A client that opens an upload session and sends a file in chunks."""

from __future__ import annotations

import argparse
import random
import sys
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from concurrencylab.chunkify import chunkify

DEFAULT_BASE_URL = "http://localhost:8080"
FILE_SIZE = 10000
CHUNK_SIZE = 100

PROMPT = "Enter command (upload, download, pause, resume, abort, exit): "
UNKNOWN_COMMAND = "Unknown command. Please enter start, stop, or exit."
_ACKNOWLEDGED = ("upload", "download", "pause", "resume", "abort")


class UploadError(Exception):
    """The server answered an upload request with a status other than 200."""

    def __init__(self, status):
        super().__init__(f"error: Received status code {status}")
        self.status = status


@dataclass
class UploadResult:
    """What happened to one file upload."""

    upload_id: str
    chunk_count: int
    failures: list = field(default_factory=list)


def generate_file_data(size=FILE_SIZE):
    """Return ``size`` random bytes to stand in for a file."""
    return random.randbytes(size)


def _post(url, body):
    request = urllib.request.Request(url, data=body, headers={"Content-Type": "text/plain"})
    try:
        with urllib.request.urlopen(request, timeout=10) as resp:
            if resp.status != 200:
                raise UploadError(resp.status)
            return resp.read()
    except urllib.error.HTTPError as exc:
        exc.close()
        raise UploadError(exc.code) from None


def initialize_upload_session(base_url=DEFAULT_BASE_URL):
    """Open a session and return its upload id."""
    return _post(f"{base_url}/upload/initiate", b"").decode("utf-8")


def upload_file_chunk(chunk, upload_id, base_url=DEFAULT_BASE_URL):
    """Send one chunk; raises UploadError unless the server answers 200."""
    _post(f"{base_url}/upload/{upload_id}/chunk", bytes(chunk))


def upload_file(file_data, base_url=DEFAULT_BASE_URL):
    """Open a session and send every chunk of ``file_data`` concurrently."""
    upload_id = initialize_upload_session(base_url)
    chunks = chunkify(file_data, CHUNK_SIZE)
    result = UploadResult(upload_id=upload_id, chunk_count=len(chunks))

    def send(chunk):
        try:
            upload_file_chunk(chunk, upload_id, base_url)
        except (UploadError, OSError) as exc:
            return exc
        return None

    if chunks:
        with ThreadPoolExecutor(max_workers=min(len(chunks), 16)) as pool:
            result.failures = [exc for exc in pool.map(send, chunks) if exc is not None]
    return result


def run_commands(lines, file_data, base_url=DEFAULT_BASE_URL):
    """Prompt for and act on each command in ``lines`` until ``exit``."""
    print(PROMPT, end="", flush=True)
    for line in lines:
        command = line.strip()
        if command == "exit":
            return
        if command in _ACKNOWLEDGED:
            print(f"Command received: {command}", flush=True)
            if command == "upload":
                upload_file(file_data, base_url)
        else:
            print(UNKNOWN_COMMAND, flush=True)
        print(PROMPT, end="", flush=True)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive upload client.")
    parser.add_argument("--url", default=DEFAULT_BASE_URL)
    args = parser.parse_args(argv)

    try:
        run_commands(sys.stdin, generate_file_data(), args.url)
    except (UploadError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0