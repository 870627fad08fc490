"""Domain name labels as encoded by RFC 1035, Section 4.1.4, including compression."""

from __future__ import annotations

from collections.abc import Iterable

_POINTER_MASK = 0xC0
_MAX_PART_LENGTH = 0xFF


class LabelError(ValueError):
    """Raised when a label sequence cannot be decoded or encoded."""


def _decode(chunk: bytes) -> str:
    return chunk.decode("utf-8", "surrogateescape")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def labels_from_bytes(data: bytes) -> list[str]:
    """Decode a sequence of RFC 1035 labels, following compression pointers.

    A name that is not terminated by a zero-length label is dropped.
    """
    buf = bytes(data)
    labels: list[str] = []
    parts: list[str] = []
    pos = 0
    resume = 0
    following_pointer = False

    while pos < len(buf):
        length = buf[pos]
        pos += 1
        if length == 0:
            labels.append(".".join(parts))
            parts = []
            if following_pointer:
                pos = resume
                following_pointer = False
        elif length & _POINTER_MASK == _POINTER_MASK:
            if following_pointer:
                raise LabelError("cannot handle nested pointers")
            following_pointer = True
            if pos + 1 > len(buf):
                raise LabelError("pointer buffer too short")
            offset = ((length & ~_POINTER_MASK & 0xFF) << 8) + buf[pos]
            resume = pos + 1
            pos = offset
        else:
            if pos + length > len(buf):
                raise LabelError("buffer too short")
            parts.append(_decode(buf[pos : pos + length]))
            pos += length
    return labels


def _label_to_bytes(label: str) -> bytes:
    if not label:
        return b"\x00"
    out = bytearray()
    for part in label.split("."):
        raw = _encode(part)
        if len(raw) > _MAX_PART_LENGTH:
            raise LabelError(f"label part is {len(raw)} bytes long, at most 255 allowed")
        out.append(len(raw))
        out += raw
    out.append(0)
    return bytes(out)


def labels_to_bytes(labels: Iterable[str]) -> bytes:
    """Encode labels without compression."""
    return b"".join(_label_to_bytes(label) for label in labels)


class Labels:
    """A list of domain names with their RFC 1035 wire form.

    When parsed from bytes the original encoding, compression included, is kept
    and returned by to_bytes() until the names in ``labels`` are changed.
    """

    def __init__(self, labels: Iterable[str] | None = None) -> None:
        self.labels: list[str] = list(labels) if labels is not None else []
        self._original: bytes | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> Labels:
        """Parse labels from their wire form."""
        data = bytes(data)
        result = cls(labels_from_bytes(data))
        result._original = data
        return result

    def to_bytes(self) -> bytes:
        """Return the wire form: the original bytes if unchanged, else a fresh encoding."""
        if self._original is not None:
            try:
                original_labels = labels_from_bytes(self._original)
            except LabelError:
                return self._original
            if original_labels == self.labels:
                return self._original
        return labels_to_bytes(self.labels)

    def length(self) -> int:
        """Return the length in bytes of the wire form."""
        return len(self.to_bytes())

    def __len__(self) -> int:
        return len(self.labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Labels):
            return NotImplemented
        return self.labels == other.labels

    def __str__(self) -> str:
        return "[" + " ".join(self.labels) + "]"

    def __repr__(self) -> str:
        return f"Labels({self.labels!r})"