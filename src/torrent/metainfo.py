"""
Typed view of a single-file .torrent metainfo dictionary.
"""
from pathlib import Path
from typing import List, NamedTuple, Optional

from bencode import decode
from bencode.structure import BencodeDict, BencodeInt, BencodeList, BencodeString
from .errors import InvalidTextEncoding, MalformedPieceBuffer, MissingField, WrongType
from .hashing import PIECE_HASH_LEN, compute_info_hash, split_piece_hashes


class InfoDict(NamedTuple):
    name: str
    piece_length: int
    pieces: bytes
    length: Optional[int] = None


class TorrentMetadata(NamedTuple):
    announce: str
    info: InfoDict
    # the generic value `info` came from; the info-hash covers all of its keys
    info_value: BencodeDict
    announce_list: Optional[List[List[str]]] = None

    @property
    def info_hash(self) -> bytes:
        return compute_info_hash(self.info_value)

    @property
    def info_hash_hex(self) -> str:
        return self.info_hash.hex()

    @property
    def piece_hashes(self) -> List[bytes]:
        return split_piece_hashes(self.info.pieces)

    @property
    def num_pieces(self) -> int:
        return len(self.info.pieces) // PIECE_HASH_LEN

    @property
    def total_length(self) -> Optional[int]:
        return self.info.length

    @property
    def last_piece_length(self) -> Optional[int]:
        if self.info.length is None or self.info.piece_length <= 0:
            return None
        return (self.info.length % self.info.piece_length) or self.info.piece_length

    def __repr__(self):
        return (
            f"TorrentMetadata(name={self.info.name!r}, pieces={self.num_pieces}, "
            f"length={self.info.length!r}, announce={self.announce!r})"
        )


# ------------------------------------------------------------
#   Field helpers
# ------------------------------------------------------------

def _require(d: BencodeDict, key: bytes, path: str):
    if key not in d:
        raise MissingField(path)
    return d[key]


def _as_text(value, path: str) -> str:
    if not isinstance(value, BencodeString):
        raise WrongType(path, "byte string")
    try:
        return value.value.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidTextEncoding(path) from exc


def _as_int(value, path: str) -> int:
    if not isinstance(value, BencodeInt):
        raise WrongType(path, "integer")
    return value.value


def _check_pieces(pieces: bytes):
    if len(pieces) % PIECE_HASH_LEN != 0:
        raise MalformedPieceBuffer(len(pieces))


def _announce_list(value) -> List[List[str]]:
    path = "announce-list"
    if not isinstance(value, BencodeList):
        raise WrongType(path, "list")

    tiers = []
    for t, tier in enumerate(value):
        if not isinstance(tier, BencodeList):
            raise WrongType(f"{path}[{t}]", "list")
        tiers.append([_as_text(url, f"{path}[{t}][{u}]") for u, url in enumerate(tier)])
    return tiers


# ------------------------------------------------------------
#   Extraction
# ------------------------------------------------------------

def extract(value) -> TorrentMetadata:
    """
    Projects a decoded metainfo value onto TorrentMetadata.

    Raises a SchemaError subclass for missing or mistyped fields and
    MalformedPieceBuffer when `pieces` is not a whole number of hashes.
    """
    if not isinstance(value, BencodeDict):
        raise WrongType("<root>", "dict")

    announce = _as_text(_require(value, b"announce", "announce"), "announce")

    info_b = _require(value, b"info", "info")
    if not isinstance(info_b, BencodeDict):
        raise WrongType("info", "dict")

    name = _as_text(_require(info_b, b"name", "info.name"), "info.name")
    piece_length = _as_int(
        _require(info_b, b"piece length", "info.piece length"), "info.piece length"
    )

    pieces_b = _require(info_b, b"pieces", "info.pieces")
    if not isinstance(pieces_b, BencodeString):
        raise WrongType("info.pieces", "byte string")
    # raw SHA-1 digests, never decoded as text
    pieces = pieces_b.value
    _check_pieces(pieces)

    length = None
    if b"length" in info_b:
        length = _as_int(info_b[b"length"], "info.length")

    announce_list = None
    if b"announce-list" in value:
        announce_list = _announce_list(value[b"announce-list"])

    info = InfoDict(name=name, piece_length=piece_length, pieces=pieces, length=length)
    return TorrentMetadata(
        announce=announce, info=info, info_value=info_b, announce_list=announce_list
    )


def from_bytes(data: bytes) -> TorrentMetadata:
    """Decodes a complete metainfo buffer and extracts its metadata."""
    return extract(decode(data))


def load(path) -> TorrentMetadata:
    """Reads a .torrent file from disk and extracts its metadata."""
    raw = Path(path).read_bytes()
    return from_bytes(raw)
