"""Word index built on top of the BSTree.

Components:
  - word_info: WordInfo value type (word plus its file/line occurrences)
  - ingest: tokenizer, occurrence recording and the text file source
  - report: by-file, by-line and by-occurrence report rendering
"""

from .word_info import WordInfo
from .ingest import (
    SourceLine,
    tokenize_line,
    record_occurrence,
    ingest_lines,
    read_text_source,
)
from .report import (
    DISPLAY_NAMES,
    display_name,
    report_header,
    format_word_info,
    build_report,
    write_report,
)

__all__ = [
    "WordInfo",
    "SourceLine",
    "tokenize_line",
    "record_occurrence",
    "ingest_lines",
    "read_text_source",
    "DISPLAY_NAMES",
    "display_name",
    "report_header",
    "format_word_info",
    "build_report",
    "write_report",
]
