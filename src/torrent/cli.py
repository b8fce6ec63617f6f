"""
Command-line interface: `decode` a bencoded string or show a torrent's `info`.
"""
import argparse
import json
import logging
import os
from typing import List, Optional

from bencode import BencodeDecodeError, decode
from bencode.structure import BencodeDict, BencodeInt, BencodeList, BencodeString
from .errors import MetainfoError
from .metainfo import load

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def to_json_value(value, binary="null"):
    """
    Converts a decoded value into something json.dumps accepts.

    Byte strings that are not UTF-8 become None, or their hex text when
    binary="hex". Dict keys that are not UTF-8 always use their hex text.
    Dict entries come out sorted by raw key bytes.
    """
    if isinstance(value, BencodeInt):
        return value.value

    if isinstance(value, BencodeString):
        try:
            return value.value.decode("utf-8")
        except UnicodeDecodeError:
            return value.value.hex() if binary == "hex" else None

    if isinstance(value, BencodeList):
        return [to_json_value(item, binary) for item in value]

    if isinstance(value, BencodeDict):
        out = {}
        for key, item in sorted(value.items(), key=lambda kv: kv[0]):
            try:
                text_key = key.decode("utf-8")
            except UnicodeDecodeError:
                text_key = key.hex()
            out[text_key] = to_json_value(item, binary)
        return out

    raise TypeError(f"Cannot render object of type {type(value)}")


def decode_command(args):
    # raw argv bytes, including any the OS could not decode as text
    value = decode(os.fsencode(args.value))
    logger.debug("Decoded %r", value)
    print(json.dumps(to_json_value(value, args.binary), separators=(",", ":"), ensure_ascii=False))


def info_command(args):
    meta = load(args.torrent)
    logger.debug("Loaded %r", meta)

    length = meta.info.length if meta.info.length is not None else "unknown"
    print(f"Tracker URL: {meta.announce}")
    print(f"Length: {length}")
    print(f"Info Hash: {meta.info_hash_hex}")
    print(f"Piece Length: {meta.info.piece_length}")
    print("Piece Hashes:")
    for piece_hash in meta.piece_hashes:
        print(piece_hash.hex())


def build_parser():
    parser = argparse.ArgumentParser(
        prog="torrent-info",
        description="Decode bencoded data and inspect .torrent files",
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    decode_parser = subparsers.add_parser('decode', help='Decode a bencoded value to JSON')
    decode_parser.add_argument('value', help='Bencoded text, e.g. d3:cow3:mooe')
    decode_parser.add_argument('--binary', choices=['null', 'hex'], default='null',
                               help='How to render byte strings that are not UTF-8')
    decode_parser.set_defaults(func=decode_command)

    info_parser = subparsers.add_parser('info', help='Show metadata of a .torrent file')
    info_parser.add_argument('torrent', help='Path to .torrent file')
    info_parser.set_defaults(func=info_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Runs the CLI and returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        args.func(args)
    except (BencodeDecodeError, MetainfoError) as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read {getattr(args, 'torrent', '')}: {e}")
        return 1

    return 0
