"""Recognition of cell markers such as ``# %%`` at the top of a code block."""
import logging
import re
from typing import Optional

from .export_config import CellsConfig, DEFAULT_CODE_REGEX, DEFAULT_MARKDOWN_REGEX

logger = logging.getLogger(__name__)


def _compile(pattern: Optional[str], fallback: str) -> re.Pattern:
    if pattern:
        try:
            return re.compile(pattern)
        except re.error as e:
            logger.warning(f"Invalid cell marker regex {pattern!r}, using default: {e}")
    return re.compile(fallback)


class CellMatcher:
    """
    Decides whether a line is a cell marker.

    Lines are stripped before matching, so a marker keeps matching with
    its trailing newline attached.
    """

    def __init__(
        self,
        code_regex: Optional[str] = None,
        markdown_regex: Optional[str] = None,
        default_marker: str = "# %%"
    ):
        self._code = _compile(code_regex, DEFAULT_CODE_REGEX)
        self._markdown = _compile(markdown_regex, DEFAULT_MARKDOWN_REGEX)
        self.default_marker = default_marker

    @classmethod
    def from_config(cls, config: CellsConfig) -> 'CellMatcher':
        return cls(config.code_regex, config.markdown_regex, config.default_marker)

    def is_code(self, line: str) -> bool:
        stripped = line.strip()
        return bool(self._code.search(stripped)) or stripped == self.default_marker

    def is_markdown(self, line: str) -> bool:
        return bool(self._markdown.search(line.strip()))

    def is_cell(self, line: str) -> bool:
        """True if ``line`` starts a code or markdown cell."""
        return self.is_code(line) or self.is_markdown(line)

    def get_cell_type(self, line: str) -> str:
        return 'markdown' if self.is_markdown(line) else 'code'
