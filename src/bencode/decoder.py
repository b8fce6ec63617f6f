"""
Bencode decoder for BitTorrent metainfo files.

A single left-to-right pass over the buffer: every parse function starts at
the cursor and leaves it just past the element it consumed.
"""
import re

from .errors import (
    BencodeDecodeError,
    DuplicateDictKey,
    MalformedInteger,
    MalformedStringLength,
    MissingDictValue,
    NestingTooDeep,
    NonStringDictKey,
    TrailingBytes,
    TruncatedString,
    UnrecognizedTag,
    UnterminatedDict,
    UnterminatedInteger,
    UnterminatedList,
)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString

_INT_RE = re.compile(rb"-?(0|[1-9][0-9]*)")
_LENGTH_RE = re.compile(rb"0|[1-9][0-9]*")

# keeps the recursive descent well inside the interpreter recursion limit
MAX_DEPTH = 200


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into Bencode types.

    With allow_duplicate_keys the last value of a repeated dict key wins;
    otherwise a repeated key raises DuplicateDictKey. Lists and dicts nested
    more than max_depth levels raise NestingTooDeep.
    """
    def __init__(self, data: bytes, allow_duplicate_keys: bool = False,
                 max_depth: int = MAX_DEPTH):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Cannot decode object of type {type(data)}, bytes required")
        self.data = bytes(data)
        self.allow_duplicate_keys = allow_duplicate_keys
        self.max_depth = max_depth
        self.i = 0  # cursor index
        self.depth = 0

    def decode(self):
        """Decodes the entire buffer, which must hold exactly one value."""
        self.i = 0
        self.depth = 0
        result = self.decode_value()
        if self.i != len(self.data):
            raise TrailingBytes(
                f"{len(self.data) - self.i} unexpected bytes after value", self.i
            )
        return result

    def decode_value(self):
        """Decodes one value at the cursor and leaves the cursor after it."""
        return self._parse_value()

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _at_end(self):
        return self.i >= len(self.data)

    def _peek(self):
        return self.data[self.i:self.i+1]

    def _consume(self, n=1):
        """Moves cursor forward by n bytes and returns the consumed chunk."""
        chunk = self.data[self.i:self.i+n]
        self.i += n
        return chunk

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self):
        ch = self._peek()

        if ch == b'i':
            return self._parse_int()

        if ch.isdigit():  # Bencode strings start with length, which is a digit
            return self._parse_string()

        if ch == b'l' or ch == b'd':
            self.depth += 1
            try:
                if self.depth > self.max_depth:
                    raise NestingTooDeep(
                        f"Containers nested deeper than {self.max_depth} levels", self.i
                    )
                return self._parse_list() if ch == b'l' else self._parse_dict()
            finally:
                self.depth -= 1

        if not ch:
            raise UnrecognizedTag("Unexpected end of input", self.i)
        raise UnrecognizedTag(f"Invalid token {ch!r}", self.i)

    def _parse_int(self):
        """Parses an integer from the Bencoded data."""
        start = self.i
        self._consume(1)  # skip 'i'

        end_pos = self.data.find(b'e', self.i)
        if end_pos == -1:
            raise UnterminatedInteger("Integer has no terminating 'e'", start)

        number_bytes = self.data[self.i:end_pos]
        if not _INT_RE.fullmatch(number_bytes) or number_bytes == b"-0":
            raise MalformedInteger(f"Invalid integer format {number_bytes!r}", start)

        self.i = end_pos + 1  # skip 'e'
        return BencodeInt(int(number_bytes))

    def _parse_string(self):
        """Parses a byte string from the Bencoded data."""
        start = self.i
        # read length until ':'
        colon = self.data.find(b':', self.i)
        if colon == -1:
            raise MalformedStringLength("String length has no ':' separator", start)

        length_bytes = self.data[self.i:colon]
        if not _LENGTH_RE.fullmatch(length_bytes):
            raise MalformedStringLength(f"Invalid string length {length_bytes!r}", start)
        length = int(length_bytes)

        self.i = colon + 1
        available = len(self.data) - self.i
        if available < length:
            raise TruncatedString(
                f"String declares {length} bytes but only {available} remain", start
            )

        return BencodeString(self._consume(length))

    def _parse_list(self):
        """Parses a list from the Bencoded data."""
        start = self.i
        self._consume(1)  # skip 'l'
        items = []

        while True:
            if self._at_end():
                raise UnterminatedList("List has no terminating 'e'", start)
            if self._peek() == b'e':
                break
            items.append(self._parse_value())

        self._consume(1)  # skip 'e'
        return BencodeList(items)

    def _parse_dict(self):
        """Parses a dictionary from the Bencoded data."""
        start = self.i
        self._consume(1)  # skip 'd'
        obj = {}

        while True:
            if self._at_end():
                raise UnterminatedDict("Dictionary has no terminating 'e'", start)
            if self._peek() == b'e':
                break

            # keys MUST be strings
            key_pos = self.i
            key = self._parse_value()
            if not isinstance(key, BencodeString):
                raise NonStringDictKey(
                    f"Dictionary key must be a byte string, got {type(key).__name__}", key_pos
                )

            if self._at_end():
                raise UnterminatedDict("Dictionary has no terminating 'e'", start)
            if self._peek() == b'e':
                raise MissingDictValue(f"Key {key.value!r} has no value", key_pos)

            value = self._parse_value()
            if key.value in obj and not self.allow_duplicate_keys:
                raise DuplicateDictKey(key.value, key_pos)
            obj[key.value] = value

        self._consume(1)  # skip 'e'
        return BencodeDict(obj)


def decode(data: bytes, allow_duplicate_keys: bool = False, max_depth: int = MAX_DEPTH):
    """
    Convenience function to decode a complete Bencoded buffer.

    Raises TrailingBytes if anything follows the value.
    """
    return BencodeDecoder(data, allow_duplicate_keys, max_depth).decode()


def decode_from(data: bytes, start: int = 0, allow_duplicate_keys: bool = False,
                max_depth: int = MAX_DEPTH):
    """
    Decodes one value beginning at `start`.

    Returns (value, next_offset) where next_offset is the index right after
    the value, so callers can keep scanning the same buffer.
    """
    decoder = BencodeDecoder(data, allow_duplicate_keys, max_depth)
    if start < 0 or start > len(decoder.data):
        raise ValueError(f"start offset {start} outside buffer of {len(decoder.data)} bytes")
    decoder.i = start
    value = decoder.decode_value()
    return value, decoder.i


__all__ = ["BencodeDecodeError", "BencodeDecoder", "MAX_DEPTH", "decode", "decode_from"]
