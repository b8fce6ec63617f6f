"""
Torrent metainfo extraction, info-hash and piece-hash helpers.
"""
from .errors import (
    IntegrityError,
    InvalidTextEncoding,
    MalformedPieceBuffer,
    MetainfoError,
    MissingField,
    SchemaError,
    WrongType,
)
from .hashing import PIECE_HASH_LEN, compute_info_hash, split_piece_hashes
from .metainfo import InfoDict, TorrentMetadata, extract, from_bytes, load

__all__ = [
    'extract', 'from_bytes', 'load', 'InfoDict', 'TorrentMetadata',
    'compute_info_hash', 'split_piece_hashes', 'PIECE_HASH_LEN',
    'MetainfoError', 'SchemaError', 'MissingField', 'WrongType',
    'InvalidTextEncoding', 'IntegrityError', 'MalformedPieceBuffer',
]
