import pytest

from netdhcp.rfc1035label import LabelError, Labels, labels_from_bytes, labels_to_bytes


def _wire(*pieces):
    out = bytearray()
    for piece in pieces:
        if isinstance(piece, int):
            out.append(piece)
        else:
            out += piece.encode()
    return bytes(out)


COMPRESSED = _wire(
    9, "slackware", 2, "it", 0,
    9, "insomniac", 192, 0,
    4, "mail", 10, "systemboot", 3, "org", 0,
    192, 31,
)


def test_labels_from_bytes():
    expected = _wire(9, "slackware", 2, "it", 0)
    labels = Labels.from_bytes(expected)
    assert len(labels.labels) == 1
    assert labels.length() == len(expected)
    assert labels.to_bytes() == expected
    assert labels.labels[0] == "slackware.it"


def test_labels_from_bytes_zero_length():
    labels = Labels.from_bytes(b"")
    assert len(labels.labels) == 0
    assert labels.length() == 0
    assert labels.to_bytes() == b""


def test_labels_from_bytes_invalid_length():
    with pytest.raises(LabelError):
        Labels.from_bytes(bytes([0x5, 0xAA, 0xBB]))


def test_labels_from_bytes_invalid_length_off_by_one():
    with pytest.raises(LabelError):
        Labels.from_bytes(bytes([0x3, 0xAA, 0xBB]))


def test_labels_to_bytes():
    expected = _wire(
        9, "slackware", 2, "it", 0,
        9, "insomniac", 9, "slackware", 2, "it", 0,
    )
    labels = Labels(["slackware.it", "insomniac.slackware.it"])
    assert labels.to_bytes() == expected


def test_label_to_bytes_zero_length():
    labels = Labels([""])
    assert labels.to_bytes() == b"\x00"


def test_compressed_label():
    expected = [
        "slackware.it",
        "insomniac.slackware.it",
        "mail.systemboot.org",
        "systemboot.org",
    ]
    labels = Labels.from_bytes(COMPRESSED)
    assert len(labels.labels) == 4
    assert labels.labels == expected
    assert labels.length() == len(COMPRESSED)


def test_short_compressed_label():
    data = _wire(9, "slackware", 2, "it", 0, 9, "insomniac", 192)
    with pytest.raises(LabelError):
        Labels.from_bytes(data)


def test_nested_compressed_label():
    data = _wire(3, "it", 0, 9, "slackware", 192, 0, 9, "insomniac", 192, 5)
    with pytest.raises(LabelError):
        Labels.from_bytes(data)


def test_modified_labels_are_reencoded_without_compression():
    labels = Labels.from_bytes(COMPRESSED)
    labels.labels.append("example.com")
    encoded = labels.to_bytes()
    assert encoded != COMPRESSED
    assert labels_from_bytes(encoded) == labels.labels
    assert 0xC0 not in encoded


def test_round_trip_plain_labels():
    names = ["a.b.c", "example.com", ""]
    assert labels_from_bytes(labels_to_bytes(names)) == names
    assert Labels.from_bytes(Labels(names).to_bytes()) == Labels(names)


def test_unterminated_name_is_dropped():
    assert labels_from_bytes(_wire(2, "it")) == []


def test_str_lists_labels():
    assert str(Labels(["slackware.it", "insomniac.slackware.it"])) == (
        "[slackware.it insomniac.slackware.it]"
    )


def test_overlong_part_rejected():
    with pytest.raises(LabelError):
        labels_to_bytes(["a" * 300])