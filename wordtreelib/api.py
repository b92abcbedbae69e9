"""High-level API for WordTreeLib.

This module provides simple, functional interfaces for the common word
tracking workflow: load the persisted index, ingest text files, save the
index back and render a report. These functions wrap the lower-level
BSTree, ingestion and storage modules for ease of use.
"""

from typing import Iterable, Optional, Union

from ._common.config import ReportMode, TrackerConfig
from .core.tree import BSTree
from .index.ingest import ingest_lines, read_text_source
from .index.report import write_report
from .logging import get_logger
from .storage.snapshot import load_tree, save_tree

logger = get_logger("api")


def build_index(
    paths: Iterable[str],
    tree: Optional[BSTree] = None,
    encoding: str = "utf-8",
) -> BSTree:
    """Ingest text files into a word index.

    Args:
        paths: Text files to read, in order
        tree: Existing index to extend (a new one is created when None)
        encoding: Text encoding of the input files

    Returns:
        The updated index

    Example:
        >>> index = build_index(["notes.txt"])
        >>> print(render_report(index, "by-file"))
    """
    if tree is None:
        tree = BSTree()
    for path in paths:
        recorded = ingest_lines(tree, read_text_source(path, encoding=encoding))
        logger.info("Ingested %s: %d words recorded", path, recorded)
    return tree


def render_report(
    tree: BSTree,
    mode: Union[ReportMode, str] = ReportMode.BY_LINE,
    output_path: Optional[str] = None,
    header: bool = False,
    encoding: str = "utf-8",
) -> str:
    """Render a report and optionally write it to ``output_path``.

    Args:
        tree: Word index
        mode: Report layout (ReportMode, long name or -pf/-pl/-po flag)
        output_path: File to write the report to (overwritten)
        header: Prefix the ``Displaying ... format`` banner line
        encoding: Encoding for the output file

    Returns:
        The report text

    Raises:
        InvalidReportModeError: If the mode selector is not recognized; the
            output file is left untouched
    """
    mode = ReportMode.parse(mode)
    if output_path:
        with open(output_path, "w", encoding=encoding) as sink:
            return write_report(tree, mode, sink=sink, header=header)
    return write_report(tree, mode, header=header)


def track_words(
    inputs: Iterable[str],
    mode: Union[ReportMode, str, None] = None,
    config: Optional[TrackerConfig] = None,
    header: bool = False,
) -> str:
    """Run the complete word tracker workflow.

    The report mode is resolved before anything else happens, so an invalid
    selector leaves the repository and the output file untouched.

    Args:
        inputs: Text files to ingest
        mode: Report layout (overrides ``config.report_mode``)
        config: Tracker configuration (environment defaults when None)
        header: Prefix the ``Displaying ... format`` banner line

    Returns:
        The report text

    Raises:
        InvalidReportModeError: If the mode selector is not recognized
        SnapshotFormatError: If the repository snapshot is malformed
        OSError: If an input, the repository or the output cannot be accessed
    """
    config = config or TrackerConfig.from_env()
    report_mode = ReportMode.parse(mode if mode is not None else config.report_mode)

    tree = load_tree(config.repository_path) if config.persist else BSTree()
    build_index(inputs, tree=tree, encoding=config.encoding)
    if config.persist:
        save_tree(tree, config.repository_path)

    return render_report(
        tree,
        report_mode,
        output_path=config.output_path,
        header=header,
        encoding=config.encoding,
    )
