"""
Exceptions raised while decoding Bencoded data.

Each malformed-input case has its own subclass so callers can tell them apart;
all of them carry the byte offset where the problem was found.
"""

__all__ = [
    "BencodeDecodeError",
    "UnrecognizedTag",
    "MalformedStringLength",
    "TruncatedString",
    "MalformedInteger",
    "UnterminatedInteger",
    "UnterminatedList",
    "UnterminatedDict",
    "NonStringDictKey",
    "MissingDictValue",
    "DuplicateDictKey",
    "TrailingBytes",
    "NestingTooDeep",
]


class BencodeDecodeError(ValueError):
    """Custom exception for Bencode decoding errors."""

    def __init__(self, message: str, offset: int):
        super().__init__(f"{message} (at byte {offset})")
        self.offset = offset


class UnrecognizedTag(BencodeDecodeError):
    """No value can start with the byte at this offset, or input ended."""


class MalformedStringLength(BencodeDecodeError):
    """The `<length>:` prefix of a byte string is not a valid length."""


class TruncatedString(BencodeDecodeError):
    """Fewer payload bytes remain than the string length declares."""


class MalformedInteger(BencodeDecodeError):
    pass


class UnterminatedInteger(BencodeDecodeError):
    pass


class UnterminatedList(BencodeDecodeError):
    pass


class UnterminatedDict(BencodeDecodeError):
    pass


class NonStringDictKey(BencodeDecodeError):
    pass


class MissingDictValue(BencodeDecodeError):
    pass


class DuplicateDictKey(BencodeDecodeError):
    def __init__(self, key: bytes, offset: int):
        super().__init__(f"Duplicate dictionary key {key!r}", offset)
        self.key = key


class TrailingBytes(BencodeDecodeError):
    """Extra data follows a complete top-level value."""


class NestingTooDeep(BencodeDecodeError):
    """Lists and dicts are nested deeper than the decoder allows."""
