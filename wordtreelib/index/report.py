"""Report rendering for the word index.

A report is a single in-order walk over the tree, so words always come out
in ascending order. Each WordInfo becomes one or more lines depending on
the ReportMode.
"""

from typing import Dict, List, Optional, TextIO, Union

from .._common.config import ReportMode
from ..core.tree import BSTree
from .word_info import WordInfo

# Display names kept for compatibility with reports produced by the
# original word tracker. Every other word is shown as stored.
DISPLAY_NAMES: Dict[str, str] = {
    "hello": "Hello",
    "kitty": "Kitty",
}

LINE_SEPARATOR = "\n"


def display_name(word: str) -> str:
    return DISPLAY_NAMES.get(word, word)


def report_header(mode: Union[ReportMode, str]) -> str:
    """Banner line printed ahead of a report, e.g. ``Displaying -pf format``."""
    return f"Displaying {ReportMode.parse(mode).flag} format"


def _format_lines(lines: List[int]) -> str:
    return "".join(f"{line}," for line in lines)


def format_word_info(info: WordInfo, mode: Union[ReportMode, str]) -> str:
    """Render one WordInfo entry.

    Args:
        info: Entry to render
        mode: Report layout

    Returns:
        The rendered text without a trailing line separator. BY_FILE entries
        span one line per file; the other modes produce a single line.
    """
    mode = ReportMode.parse(mode)
    name = display_name(info.word)

    if mode is ReportMode.BY_FILE:
        return LINE_SEPARATOR.join(
            f"Key : ==={name}===  found in file: {file_name}"
            for file_name in info.files()
        )

    segments = []
    total = 0
    for file_name, lines in info.iter_locations():
        if mode is ReportMode.BY_OCCURRENCE:
            segments.append(
                f"number of entries: {len(lines)} in file: {file_name} "
                f"on lines: {_format_lines(lines)}"
            )
        else:
            segments.append(f"found in file: {file_name} on lines: {_format_lines(lines)}")
        total += len(lines)

    text = f"Key : ==={name}=== " + " ".join(segments)
    if mode is ReportMode.BY_OCCURRENCE:
        text += f" (Total: {total})"
    return text


def build_report(tree: BSTree, mode: Union[ReportMode, str]) -> str:
    """Render the whole index in ascending word order.

    Entries are separated by a line separator and the report always ends
    with one. Entries that render to an empty string are skipped.
    """
    mode = ReportMode.parse(mode)
    entries = []
    iterator = tree.inorder_iterator()
    while iterator.has_next():
        formatted = format_word_info(iterator.next(), mode)
        if formatted:
            entries.append(formatted)
    return LINE_SEPARATOR.join(entries) + LINE_SEPARATOR


def write_report(tree: BSTree, mode: Union[ReportMode, str],
                 sink: Optional[TextIO] = None, header: bool = False) -> str:
    """Build a report and optionally write it verbatim to ``sink``.

    Args:
        tree: Word index
        mode: Report layout
        sink: Text stream to write to (None = just return the text)
        header: Prefix the ``Displaying ... format`` banner line

    Returns:
        The report text
    """
    text = build_report(tree, mode)
    if header:
        text = report_header(mode) + LINE_SEPARATOR + text
    if sink is not None:
        sink.write(text)
    return text
