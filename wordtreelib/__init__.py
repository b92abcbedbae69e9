"""WordTreeLib - Binary Search Tree and Word Index Library.

WordTreeLib provides a plain (unbalanced) binary search tree with external
in-order, pre-order and post-order iterators, and a word tracker built on
top of it that records every (file, line) occurrence of each word and
renders the index as a report.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Tree:
    from wordtreelib import BSTree
    tree = BSTree.from_iterable([5, 3, 8, 1, 4, 7, 9])
    list(tree.postorder_iterator())     # [1, 4, 3, 7, 9, 8, 5]

Word index:
    from wordtreelib import build_index, render_report
    index = build_index(["notes.txt"])
    print(render_report(index, "by-occurrence"))
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    BSTree,
    BSTreeNode,
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
    TreeError,
    NullArgumentError,
    EmptyTreeError,
    IteratorExhaustedError,
)
from .config import (
    TraversalOrder,
    ReportMode,
    InvalidReportModeError,
    TrackerConfig,
)
from .index import (
    WordInfo,
    tokenize_line,
    record_occurrence,
    ingest_lines,
    read_text_source,
    format_word_info,
    build_report,
)
from .storage import (
    SnapshotFormatError,
    encode_tree,
    decode_tree,
    load_tree,
    save_tree,
)
from .api import build_index, render_report, track_words

__all__ = [
    "__version__",
    # Core
    "BSTree",
    "BSTreeNode",
    "TreeIterator",
    "InorderIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_iterator",
    "TreeError",
    "NullArgumentError",
    "EmptyTreeError",
    "IteratorExhaustedError",
    # Config
    "TraversalOrder",
    "ReportMode",
    "InvalidReportModeError",
    "TrackerConfig",
    # Word index
    "WordInfo",
    "tokenize_line",
    "record_occurrence",
    "ingest_lines",
    "read_text_source",
    "format_word_info",
    "build_report",
    # Storage
    "SnapshotFormatError",
    "encode_tree",
    "decode_tree",
    "load_tree",
    "save_tree",
    # API
    "build_index",
    "render_report",
    "track_words",
]
