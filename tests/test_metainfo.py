import hashlib

import pytest

from bencode import decode, encode
from bencode.errors import TrailingBytes
from bencode.structure import BencodeDict
from torrent.errors import (
    InvalidTextEncoding,
    MalformedPieceBuffer,
    MissingField,
    WrongType,
)
from torrent.hashing import compute_info_hash, split_piece_hashes
from torrent.metainfo import extract, from_bytes, load

PIECES = bytes(range(20)) + bytes(range(100, 120))


def make_torrent(info=None, root=None):
    info_d = {
        b"name": b"sample.txt",
        b"piece length": 32768,
        b"pieces": PIECES,
        b"length": 40000,
    }
    info_d.update(info or {})
    torrent = {b"announce": b"http://tracker.example/announce", b"info": info_d}
    torrent.update(root or {})
    return torrent


def test_metainfo_load(tmp_path):
    path = tmp_path / "sample.torrent"
    path.write_bytes(encode(make_torrent()))
    print("Loading torrent:", path)

    meta = load(path)
    print("Parsed TorrentMetadata:", meta)

    assert meta.announce == "http://tracker.example/announce"
    assert meta.info.name == "sample.txt"
    assert meta.info.piece_length == 32768
    assert meta.info.length == 40000
    assert meta.info.pieces == PIECES
    assert meta.num_pieces == 2
    assert meta.total_length == 40000
    assert meta.last_piece_length == 40000 - 32768

    print("Info hash:", meta.info_hash_hex)


def test_info_hash_matches_sha1_of_info_encoding():
    torrent = make_torrent()
    meta = from_bytes(encode(torrent))
    expected = hashlib.sha1(encode(torrent[b"info"])).digest()
    assert meta.info_hash == expected
    assert len(meta.info_hash) == 20
    assert meta.info_hash_hex == expected.hex()


def test_info_hash_ignores_announce_and_key_order():
    info_sorted = (
        b"d6:lengthi40000e4:name10:sample.txt12:piece lengthi32768e6:pieces40:"
        + PIECES + b"e"
    )
    info_unsorted = (
        b"d4:name10:sample.txt6:pieces40:" + PIECES
        + b"12:piece lengthi32768e6:lengthi40000ee"
    )
    a = from_bytes(b"d8:announce5:http:4:info" + info_sorted + b"e")
    b = from_bytes(b"d4:info" + info_unsorted + b"8:announce9:http://x/e")

    assert a.info_hash == b.info_hash
    assert a.info_hash == hashlib.sha1(info_sorted).digest()


def test_info_hash_covers_extra_info_keys():
    plain = from_bytes(encode(make_torrent()))
    private = from_bytes(encode(make_torrent(info={b"private": 1})))
    assert plain.info == private.info
    assert plain.info_hash != private.info_hash


def test_compute_info_hash_is_stable():
    info = decode(encode(make_torrent()[b"info"]))
    first = compute_info_hash(info)
    assert compute_info_hash(info) == first
    assert compute_info_hash(info.to_python()) == first


def test_split_piece_hashes():
    chunks = split_piece_hashes(PIECES)
    assert chunks == [PIECES[:20], PIECES[20:]]
    assert split_piece_hashes(b"") == []


def test_split_piece_hashes_rejects_partial():
    with pytest.raises(MalformedPieceBuffer) as exc:
        split_piece_hashes(b"x" * 39)
    assert exc.value.length == 39


def test_pieces_stay_binary():
    pieces = b"\xff" * 20
    meta = from_bytes(encode(make_torrent(info={b"pieces": pieces})))
    assert meta.piece_hashes == [pieces]


def test_length_is_optional():
    torrent = make_torrent()
    del torrent[b"info"][b"length"]
    meta = extract(decode(encode(torrent)))
    assert meta.info.length is None
    assert meta.last_piece_length is None


def test_announce_list():
    meta = from_bytes(encode(make_torrent(root={
        b"announce-list": [[b"http://a/announce", b"http://b/announce"], [b"udp://c:80"]],
    })))
    assert meta.announce_list == [["http://a/announce", "http://b/announce"], ["udp://c:80"]]
    assert from_bytes(encode(make_torrent())).announce_list is None


def test_announce_list_wrong_type():
    with pytest.raises(WrongType) as exc:
        from_bytes(encode(make_torrent(root={b"announce-list": [b"http://a"]})))
    assert exc.value.field == "announce-list[0]"


def test_root_must_be_dict():
    with pytest.raises(WrongType) as exc:
        extract(decode(b"le"))
    assert exc.value.field == "<root>"


@pytest.mark.parametrize("path", [b"announce", b"info"])
def test_missing_top_level_field(path):
    torrent = make_torrent()
    del torrent[path]
    with pytest.raises(MissingField) as exc:
        from_bytes(encode(torrent))
    assert exc.value.field == path.decode()


@pytest.mark.parametrize("key", [b"name", b"piece length", b"pieces"])
def test_missing_info_field(key):
    torrent = make_torrent()
    del torrent[b"info"][key]
    with pytest.raises(MissingField) as exc:
        from_bytes(encode(torrent))
    assert exc.value.field == "info." + key.decode()


@pytest.mark.parametrize("torrent, field", [
    (make_torrent(root={b"announce": 1}), "announce"),
    (make_torrent(root={b"info": []}), "info"),
    (make_torrent(info={b"name": 5}), "info.name"),
    (make_torrent(info={b"piece length": b"32768"}), "info.piece length"),
    (make_torrent(info={b"pieces": 7}), "info.pieces"),
    (make_torrent(info={b"length": b"10"}), "info.length"),
])
def test_wrong_type(torrent, field):
    with pytest.raises(WrongType) as exc:
        from_bytes(encode(torrent))
    assert exc.value.field == field


@pytest.mark.parametrize("torrent, field", [
    (make_torrent(root={b"announce": b"http://\xff"}), "announce"),
    (make_torrent(info={b"name": b"\xfe\xff"}), "info.name"),
])
def test_invalid_text_encoding(torrent, field):
    with pytest.raises(InvalidTextEncoding) as exc:
        from_bytes(encode(torrent))
    assert exc.value.field == field


def test_malformed_pieces_rejected():
    with pytest.raises(MalformedPieceBuffer) as exc:
        from_bytes(encode(make_torrent(info={b"pieces": b"x" * 39})))
    assert exc.value.length == 39


def test_piece_hashes_follow_pieces_buffer():
    meta = from_bytes(encode(make_torrent()))
    assert meta.info.pieces == PIECES
    assert meta.piece_hashes == [PIECES[:20], PIECES[20:]]
    assert meta.num_pieces == len(meta.piece_hashes)


def test_trailing_garbage_rejected():
    with pytest.raises(TrailingBytes):
        from_bytes(encode(make_torrent()) + b"junk")


def test_metadata_is_immutable():
    meta = from_bytes(encode(make_torrent()))
    assert isinstance(meta.info_value, BencodeDict)
    with pytest.raises(AttributeError):
        meta.announce = "http://other/"
    with pytest.raises(AttributeError):
        meta.info.length = 1
