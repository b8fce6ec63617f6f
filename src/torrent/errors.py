"""
Exceptions raised while turning a decoded value into torrent metadata.
"""

__all__ = [
    "MetainfoError",
    "SchemaError",
    "MissingField",
    "WrongType",
    "InvalidTextEncoding",
    "IntegrityError",
    "MalformedPieceBuffer",
]


class MetainfoError(Exception):
    """Base class for metadata extraction errors."""


class SchemaError(MetainfoError):
    """A field is missing or does not have the expected shape."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class MissingField(SchemaError):
    def __init__(self, field: str):
        super().__init__(f"Torrent missing required field '{field}'", field)


class WrongType(SchemaError):
    def __init__(self, field: str, expected: str):
        super().__init__(f"Field '{field}' must be a {expected}", field)
        self.expected = expected


class InvalidTextEncoding(SchemaError):
    def __init__(self, field: str):
        super().__init__(f"Field '{field}' is not valid UTF-8 text", field)


class IntegrityError(MetainfoError):
    """Metadata is well-formed but internally inconsistent."""


class MalformedPieceBuffer(IntegrityError):
    def __init__(self, length: int):
        super().__init__(f"Pieces buffer of {length} bytes is not a multiple of 20")
        self.length = length
