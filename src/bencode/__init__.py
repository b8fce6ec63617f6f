"""
Bencode package for encoding and decoding BitTorrent data.
"""
from .decoder import BencodeDecoder, decode, decode_from
from .encoder import encode
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
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

__all__ = [
    'decode', 'decode_from', 'encode', 'BencodeDecoder',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'UnrecognizedTag', 'MalformedStringLength', 'TruncatedString',
    'MalformedInteger', 'UnterminatedInteger', 'UnterminatedList', 'UnterminatedDict',
    'NonStringDictKey', 'MissingDictValue', 'DuplicateDictKey', 'TrailingBytes',
    'NestingTooDeep',
]
