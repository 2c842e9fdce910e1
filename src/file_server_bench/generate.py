import hashlib
import os
import random
import string

from file_server_bench.constants import BLOCK_SIZE
from file_server_bench.utils import format_size, sha256_file

ALPHANUMERIC = string.ascii_letters + string.digits


def generate_block(rng: random.Random, size: int) -> bytes:
    """Return `size` random alphanumeric ASCII bytes."""
    return "".join(rng.choices(ALPHANUMERIC, k=size)).encode("ascii")


def generate_random_text_file(path, size: int, seed: int | None = None) -> str:
    """
    Write a file of random alphanumeric text and return its SHA-256 digest.

    A file that already exists with exactly `size` bytes is kept as is and
    only hashed; its content is not checked against anything.

    Args:
        path: Destination path
        size: Target file size in bytes
        seed: Optional seed for reproducible content

    Returns:
        Lowercase hexadecimal SHA-256 digest of the file content
    """
    if size < 0:
        raise ValueError(f"File size must not be negative: {size}")

    if os.path.isfile(path) and os.path.getsize(path) == size:
        print(
            f"File: {path} already exists with the correct size of "
            f"{size} bytes ({format_size(size)})."
        )
        return sha256_file(path)

    rng = random.Random(seed)
    hasher = hashlib.sha256()
    generated_size = 0

    with open(path, "wb") as f:
        while generated_size < size:
            chunk_size = min(BLOCK_SIZE, size - generated_size)
            block = generate_block(rng, chunk_size)
            f.write(block)
            hasher.update(block)
            generated_size += chunk_size

    print(f"Generated file: {path} ({format_size(size)})")
    return hasher.hexdigest()
