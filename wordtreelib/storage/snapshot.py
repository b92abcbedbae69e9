"""
WordTreeLib Snapshot Format
===========================
Versioned binary persistence for a word index (a BSTree of WordInfo).

Layout (all integers big-endian):
  [magic: 4B "WTRX"] [version: 2B] [count: 4B] [record...]

Record:
  [word_len: 2B] [word: UTF-8]
  [file_count: 2B]
  per file: [name_len: 2B] [name: UTF-8] [line_count: 4B] [line: 4B]*line_count

Records are written in pre-order. Re-inserting them in that order
rebuilds exactly the same tree shape, so a reloaded (and never
rebalanced) index behaves identically to the one that was saved.
"""

import os
import struct
import tempfile
from typing import Iterator, Tuple

from ..core.errors import TreeError
from ..core.tree import BSTree
from ..index.word_info import WordInfo
from ..logging import get_logger

logger = get_logger("storage.snapshot")

# ─── Constants ──────────────────────────────────────────────────────────────

SNAPSHOT_MAGIC = b"WTRX"
SNAPSHOT_FORMAT_VERSION = 1

_HEADER = struct.Struct(">4sHI")
_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")

_MAX_U16 = 0xFFFF
_MAX_U32 = 0xFFFFFFFF


class SnapshotFormatError(TreeError, ValueError):
    """Raised when a snapshot cannot be encoded or is malformed."""
    pass


# ─── Encoding ───────────────────────────────────────────────────────────────

def _pack_text(buf: bytearray, text: str, what: str) -> None:
    raw = text.encode("utf-8")
    if len(raw) > _MAX_U16:
        raise SnapshotFormatError(f"{what} too long to encode ({len(raw)} bytes)")
    buf.extend(_U16.pack(len(raw)))
    buf.extend(raw)


def _pack_record(buf: bytearray, info: WordInfo) -> None:
    _pack_text(buf, info.word, "word")
    files = info.files()
    if len(files) > _MAX_U16:
        raise SnapshotFormatError(f"too many files for word {info.word!r}")
    buf.extend(_U16.pack(len(files)))
    for file_name, lines in info.iter_locations():
        _pack_text(buf, file_name, "file name")
        buf.extend(_U32.pack(len(lines)))
        for line in lines:
            if not 0 <= line <= _MAX_U32:
                raise SnapshotFormatError(f"line number out of range: {line}")
            buf.extend(_U32.pack(line))


def encode_tree(tree: BSTree) -> bytes:
    """Serialize a word index to snapshot bytes."""
    buf = bytearray(_HEADER.pack(SNAPSHOT_MAGIC, SNAPSHOT_FORMAT_VERSION, tree.size()))
    iterator = tree.preorder_iterator()
    while iterator.has_next():
        _pack_record(buf, iterator.next())
    return bytes(buf)


# ─── Decoding ───────────────────────────────────────────────────────────────

class _Reader:
    """Bounds-checked cursor over snapshot bytes."""

    __slots__ = ("data", "offset")

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def unpack(self, fmt: struct.Struct) -> Tuple:
        if self.offset + fmt.size > len(self.data):
            raise SnapshotFormatError(f"truncated snapshot at byte {self.offset}")
        values = fmt.unpack_from(self.data, self.offset)
        self.offset += fmt.size
        return values

    def text(self) -> str:
        (length,) = self.unpack(_U16)
        end = self.offset + length
        if end > len(self.data):
            raise SnapshotFormatError(f"truncated snapshot at byte {self.offset}")
        raw = self.data[self.offset:end]
        self.offset = end
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SnapshotFormatError(f"invalid UTF-8 text: {exc}") from exc

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset


def _iter_records(reader: _Reader, count: int) -> Iterator[WordInfo]:
    for _ in range(count):
        info = WordInfo(reader.text())
        (file_count,) = reader.unpack(_U16)
        for _ in range(file_count):
            file_name = reader.text()
            (line_count,) = reader.unpack(_U32)
            for _ in range(line_count):
                (line,) = reader.unpack(_U32)
                info.add_occurrence(file_name, line)
        yield info


def decode_tree(data: bytes) -> BSTree:
    """Rebuild a word index from snapshot bytes.

    Raises:
        SnapshotFormatError: On bad magic, unsupported version, truncated or
            trailing data, or duplicate words
    """
    reader = _Reader(data)
    magic, version, count = reader.unpack(_HEADER)
    if magic != SNAPSHOT_MAGIC:
        raise SnapshotFormatError(f"not a word index snapshot (magic {magic!r})")
    if version != SNAPSHOT_FORMAT_VERSION:
        raise SnapshotFormatError(f"unsupported snapshot version {version}")

    tree = BSTree()
    for info in _iter_records(reader, count):
        if not tree.add(info):
            raise SnapshotFormatError(f"duplicate word in snapshot: {info.word!r}")
    if reader.remaining:
        raise SnapshotFormatError(f"{reader.remaining} trailing bytes after last record")
    return tree


# ─── File I/O ───────────────────────────────────────────────────────────────

def load_tree(path: str) -> BSTree:
    """Load a word index, or return an empty tree if ``path`` does not exist."""
    if not os.path.exists(path):
        logger.debug("No snapshot at %s; starting with an empty index", path)
        return BSTree()
    with open(path, "rb") as handle:
        tree = decode_tree(handle.read())
    logger.debug("Loaded %d words from %s", tree.size(), path)
    return tree


def save_tree(tree: BSTree, path: str) -> None:
    """
    Persist a word index using an atomic write.

    Strategy: write to a temp file in the same directory, fsync, then
    os.replace() onto the target. A failure part-way leaves the previous
    snapshot intact.
    """
    data = encode_tree(tree)
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)

    tmp_fd, tmp_path = tempfile.mkstemp(dir=directory, prefix="snapshot_", suffix=".tmp")
    try:
        with os.fdopen(tmp_fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
    logger.debug("Saved %d words (%d bytes) to %s", tree.size(), len(data), path)
