"""
Canonical Bencode encoder.

Output is deterministic: dictionary entries are always written in ascending
raw-byte order of their keys, whatever order they were inserted or decoded in.
"""
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString


def encode(obj) -> bytes:
    """Encodes a Python object or BencodeType into bencoded bytes."""

    if isinstance(obj, bool):
        raise TypeError("Cannot bencode a bool, use an int")

    if isinstance(obj, (int, BencodeInt)):
        value = obj if isinstance(obj, int) else obj.value
        return encode_int(value)

    if isinstance(obj, (str, BencodeString)):
        if isinstance(obj, str):
            return encode_str(obj)
        # BencodeString wraps bytes
        return encode_bytes(obj.value)

    if isinstance(obj, (bytes, bytearray)):
        return encode_bytes(bytes(obj))

    if isinstance(obj, (list, tuple, BencodeList)):
        value = obj.value if isinstance(obj, BencodeList) else obj
        return encode_list(value)

    if isinstance(obj, (dict, BencodeDict)):
        value = obj.value if isinstance(obj, BencodeDict) else obj
        return encode_dict(value)

    raise TypeError(f"Cannot bencode object of type {type(obj)}")


# ------------------------------------------------------------
#   Encoding primitives
# ------------------------------------------------------------

def encode_int(n: int) -> bytes:
    """Encodes an integer to bencoded bytes (e.g., i123e)."""
    return b"i%de" % n


def encode_bytes(payload: bytes) -> bytes:
    """Length-prefixed byte string: b"spam" -> 4:spam."""
    return b"%d:%s" % (len(payload), payload)


def encode_str(text: str) -> bytes:
    """UTF-8 text written as a byte string."""
    return encode_bytes(text.encode("utf-8"))


def encode_list(items) -> bytes:
    """Items in their original order between l and e."""
    parts = [b"l"]
    parts.extend(encode(item) for item in items)
    parts.append(b"e")
    return b"".join(parts)


def _key_to_bytes(k) -> bytes:
    if isinstance(k, BencodeString):
        return k.value
    if isinstance(k, (bytes, bytearray)):
        return bytes(k)
    if isinstance(k, str):
        return k.encode()
    raise TypeError(f"Dictionary keys must be bytes or str, not {type(k)}")


def encode_dict(d) -> bytes:
    """Encodes a dictionary to bencoded bytes (e.g., d3:cow3:moo4:spam4:eggse)."""
    entries = {}
    for key, value in d.items():
        key_bytes = _key_to_bytes(key)
        if key_bytes in entries:
            raise ValueError(f"Dictionary key {key_bytes!r} appears more than once")
        entries[key_bytes] = value

    parts = [b"d"]
    # bytes compare lexicographically by raw value
    for key_bytes in sorted(entries):
        parts.append(encode_bytes(key_bytes))
        parts.append(encode(entries[key_bytes]))
    parts.append(b"e")

    return b"".join(parts)


__all__ = ["encode", "encode_int", "encode_bytes", "encode_str", "encode_list", "encode_dict"]
