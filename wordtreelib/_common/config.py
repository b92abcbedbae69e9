"""Configuration system for WordTreeLib.

This module defines how callers choose traversal orders and report modes,
and how the word tracker locates its repository and configures logging.
Runtime defaults can be overridden through ``WORDTRACKER_*`` environment
variables.

Important: this module must NEVER import from ``wordtreelib.core`` or
``wordtreelib.index`` to avoid circular dependencies.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Optional, Union


DEFAULT_REPOSITORY = "repository.wtx"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


class TraversalOrder(Enum):
    """Order in which a tree iterator visits nodes."""
    IN_ORDER = "inorder"        # Left, root, right (ascending)
    PRE_ORDER = "preorder"      # Root before children
    POST_ORDER = "postorder"    # Children before root

    @classmethod
    def parse(cls, order: Union["TraversalOrder", str]) -> "TraversalOrder":
        """Resolve a member or a case-insensitive name to a TraversalOrder.

        Accepts ``inorder``/``in_order``/``in-order`` and the equivalent
        spellings for the other two orders.

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(order, cls):
            return order
        key = str(order).strip().lower().replace("_", "").replace("-", "")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(m.value for m in cls)}"
        )


class InvalidReportModeError(ValueError):
    """Raised when a report mode selector is not recognized."""
    pass


class ReportMode(Enum):
    """Layout of a word index report."""
    BY_FILE = "by-file"               # One line per (word, file)
    BY_LINE = "by-line"               # One line per word, with line numbers
    BY_OCCURRENCE = "by-occurrence"   # Like BY_LINE plus per-file and total counts

    @property
    def flag(self) -> str:
        """Short command-line flag for this mode (-pf, -pl, -po)."""
        return _MODE_FLAGS[self]

    @classmethod
    def parse(cls, selector: Union["ReportMode", str]) -> "ReportMode":
        """Resolve a mode selector.

        Both the long names (``by-file``) and the short flags (``-pf``) are
        accepted.

        Raises:
            InvalidReportModeError: If the selector is not recognized
        """
        if isinstance(selector, cls):
            return selector
        key = str(selector).strip().lower()
        for member in cls:
            if key == member.value or key == member.flag:
                return member
        raise InvalidReportModeError(
            f"Invalid report mode: {selector!r}. "
            f"Use one of: {', '.join(m.flag for m in cls)} "
            f"({', '.join(m.value for m in cls)})"
        )


_MODE_FLAGS: Dict[ReportMode, str] = {
    ReportMode.BY_FILE: "-pf",
    ReportMode.BY_LINE: "-pl",
    ReportMode.BY_OCCURRENCE: "-po",
}


@dataclass
class TrackerConfig:
    """Complete configuration for a word tracker run.

    This is the primary way callers specify where the index is persisted,
    how it is reported and where the report goes.
    """

    # Persistence
    repository_path: str = DEFAULT_REPOSITORY
    persist: bool = True  # Save the index back after ingestion

    # Input
    encoding: str = DEFAULT_ENCODING

    # Output
    report_mode: str = ReportMode.BY_LINE.value
    output_path: Optional[str] = None  # None = return / print the report

    # Diagnostics
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, **overrides) -> "TrackerConfig":
        """Create a config from ``WORDTRACKER_*`` environment variables.

        Args:
            **overrides: Field values that take precedence over the environment

        Returns:
            TrackerConfig populated from the environment
        """
        config = cls(
            repository_path=os.getenv("WORDTRACKER_REPOSITORY", DEFAULT_REPOSITORY),
            encoding=os.getenv("WORDTRACKER_ENCODING", DEFAULT_ENCODING),
            log_level=os.getenv("WORDTRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
        )
        for key, value in overrides.items():
            if value is not None and hasattr(config, key):
                setattr(config, key, value)
        return config

    @property
    def mode(self) -> ReportMode:
        """The parsed report mode."""
        return ReportMode.parse(self.report_mode)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            ReportMode.parse(self.report_mode)
        except InvalidReportModeError as exc:
            errors.append(str(exc))

        if not self.repository_path and self.persist:
            errors.append("repository_path required when persist is enabled")

        if self.output_path is not None and not self.output_path.strip():
            errors.append("output_path cannot be blank")

        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            errors.append(f"unknown log level: {self.log_level}")

        return errors


@lru_cache(maxsize=None)
def runtime_config() -> TrackerConfig:
    """Process-wide configuration built from the environment (cached)."""
    return TrackerConfig.from_env()


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
