"""Text ingestion for the word index.

Turns lines of text into word occurrences and records them in a BSTree of
WordInfo entries: search first, then either update the existing entry in
place or insert a new one.
"""

import os
import re
from typing import Iterable, Iterator, List, Tuple

from ..core.tree import BSTree
from ..logging import get_logger
from .word_info import WordInfo

logger = get_logger("index.ingest")

# (file name, 1-indexed line number, raw line text)
SourceLine = Tuple[str, int, str]

_NON_WORD = re.compile(r"[^A-Za-z ]")
_SPACES = re.compile(r" +")


def tokenize_line(text: str) -> List[str]:
    """Split a line into lower-cased words.

    Everything that is not an ASCII letter or a space is dropped first, so
    ``"don't"`` becomes ``"dont"`` and tabs glue their neighbours together.

    Example:
        >>> tokenize_line("Hello, World hello!")
        ['hello', 'world', 'hello']
    """
    stripped = _NON_WORD.sub("", text)
    return [token.lower() for token in _SPACES.split(stripped) if token]


def record_occurrence(tree: BSTree, word: str, file_name: str, line_number: int) -> WordInfo:
    """Record one occurrence of ``word`` and return its WordInfo entry.

    The tree only grows when the word has not been seen before.
    """
    node = tree.search(WordInfo(word))
    if node is not None:
        info = node.value
        info.add_occurrence(file_name, line_number)
        return info

    info = WordInfo(word)
    info.add_occurrence(file_name, line_number)
    tree.add(info)
    return info


def ingest_lines(tree: BSTree, source: Iterable[SourceLine]) -> int:
    """Record every word of every line from ``source``.

    Args:
        tree: Word index to update
        source: (file name, line number, text) triples

    Returns:
        Number of word occurrences recorded
    """
    recorded = 0
    before = tree.size()
    for file_name, line_number, text in source:
        for word in tokenize_line(text):
            record_occurrence(tree, word, file_name, line_number)
            recorded += 1
    logger.debug("Recorded %d occurrences, %d new words", recorded, tree.size() - before)
    return recorded


def read_text_source(path: str, encoding: str = "utf-8") -> Iterator[SourceLine]:
    """Yield the lines of a text file as (basename, line number, text).

    Line numbers start at 1 and trailing newlines are removed. Occurrences
    are keyed by the file's base name, not its full path.
    """
    file_name = os.path.basename(path)
    with open(path, "r", encoding=encoding) as handle:
        for line_number, line in enumerate(handle, start=1):
            yield file_name, line_number, line.rstrip("\r\n")
