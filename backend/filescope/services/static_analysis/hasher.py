"""
FileScope Hasher

SHA-256 digests of whole files, computed in fixed-size chunks over a
memoryview so large inputs are never copied.
"""

import hashlib
from typing import Union

from filescope.utils.constants import HASH_CHUNK_SIZE

BytesLike = Union[bytes, bytearray, memoryview]


def sha256_hex(data: BytesLike, chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """
    Return the lowercase hex SHA-256 of an in-memory buffer.

    Args:
        data: File content
        chunk_size: Bytes fed to the digest per update

    Returns:
        64-character hex digest
    """
    digest = hashlib.sha256()
    view = memoryview(data)
    for offset in range(0, len(view), chunk_size):
        digest.update(view[offset:offset + chunk_size])
    return digest.hexdigest()
