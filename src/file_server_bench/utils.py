import hashlib
import re
import sys
from datetime import datetime

from file_server_bench.constants import BLOCK_SIZE


def sha256_hexdigest(data: bytes) -> str:
    """
    Compute the SHA-256 digest of an in-memory buffer.

    Args:
        data: Bytes to hash

    Returns:
        Lowercase hexadecimal digest
    """
    return hashlib.sha256(data).hexdigest()


def sha256_file(path, block_size: int = BLOCK_SIZE) -> str:
    """
    Compute the SHA-256 digest of a file, reading it block by block.

    Args:
        path: Path of the file to hash
        block_size: Number of bytes read per block

    Returns:
        Lowercase hexadecimal digest
    """
    hasher = hashlib.sha256()
    with open(path, "rb") as f:
        while block := f.read(block_size):
            hasher.update(block)

    return hasher.hexdigest()


def timestamp() -> str:
    return str(datetime.now())


def log(message: str):
    """Print an event line prefixed with the local time."""
    print(f"{timestamp()} - {message}")


def log_error(message: str):
    """Print an error line prefixed with the local time to stderr."""
    print(f"{timestamp()} - {message}", file=sys.stderr)


def format_duration(seconds: float) -> str:
    """
    Format a duration in seconds to a human-readable string.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 1:
        return f"{seconds * 1000:.2f}ms"

    return f"{seconds:.2f}s"


def format_size(size: int) -> str:
    """
    Format size in bytes to human-readable format.

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    units = ["B", "KB", "MB", "GB", "TB"]
    unit_index = 0

    while size >= 1024 and unit_index < len(units) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.2f} {units[unit_index]}"


def parse_size(size_str: str) -> int:
    """
    Parse a size string with optional suffix (KB, MB, GB) to bytes.

    Args:
        size_str: Size string (e.g., "2048", "10KB", "1GB")

    Returns:
        Size in bytes
    """
    match = re.match(r"^(\d+)([KMG]B)?$", size_str.strip(), re.IGNORECASE)
    if not match:
        raise ValueError(
            f"Invalid size format: {size_str}. Expected format: NUMBER[KB|MB|GB]"
        )

    value, unit = match.groups()
    value = int(value)

    if unit:
        unit = unit.upper()
        if unit == "KB":
            value *= 1024
        elif unit == "MB":
            value *= 1024**2
        elif unit == "GB":
            value *= 1024**3

    return value
