"""
Info-hash computation and piece-hash splitting.
"""
import hashlib
from typing import List

from bencode import encode
from .errors import MalformedPieceBuffer

PIECE_HASH_LEN = 20  # SHA-1 digest size


def compute_info_hash(info) -> bytes:
    """
    SHA-1 of the canonical encoding of the info dictionary.

    Only the info value is hashed, so nothing else in the source file
    (announce URL, key order, trailing data) changes the result.
    """
    return hashlib.sha1(encode(info)).digest()


def split_piece_hashes(pieces: bytes) -> List[bytes]:
    """Splits the concatenated piece hashes into 20-byte chunks, in piece order."""
    if len(pieces) % PIECE_HASH_LEN != 0:
        raise MalformedPieceBuffer(len(pieces))
    pieces = bytes(pieces)
    return [pieces[i:i+PIECE_HASH_LEN] for i in range(0, len(pieces), PIECE_HASH_LEN)]
