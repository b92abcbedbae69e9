"""
WordTreeLib Storage
===================
Snapshot persistence for word indexes.

Usage:
    from wordtreelib.storage import load_tree, save_tree
"""

from .snapshot import (
    SNAPSHOT_MAGIC,
    SNAPSHOT_FORMAT_VERSION,
    SnapshotFormatError,
    encode_tree,
    decode_tree,
    load_tree,
    save_tree,
)

__all__ = [
    "SNAPSHOT_MAGIC",
    "SNAPSHOT_FORMAT_VERSION",
    "SnapshotFormatError",
    "encode_tree",
    "decode_tree",
    "load_tree",
    "save_tree",
]
