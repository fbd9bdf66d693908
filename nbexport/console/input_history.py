"""
Input history for the interactive console.

Recalls previously submitted code with up/down navigation, the way a
shell does. Entries are kept oldest first; the cursor is either ``None``
(past the newest entry, nothing recalled) or the index of the entry
currently shown.
"""
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 500


class InputHistory:
    """
    Bounded, append-only recall stack.

    Both ends saturate: going up past the oldest entry, or down past the
    newest, hands back whatever the user currently has in the input box.
    """

    def __init__(self, max_entries: Optional[int] = DEFAULT_MAX_ENTRIES):
        self._entries: List[str] = []
        self._cursor: Optional[int] = None
        self.max_entries = max_entries

    @classmethod
    def from_config(cls, config) -> "InputHistory":
        """Build from the ``history`` section of ExportConfig."""
        return cls(max_entries=config.max_entries)

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, entry: str):
        """
        Record a submitted entry and reset navigation.

        Submitting the newest entry again does not duplicate it. If that entry
        was just recalled the cursor stays on it, so the next ``complete_up``
        continues from there; otherwise navigation starts over.
        """
        if self._entries and self._entries[-1] == entry:
            if self._cursor != len(self._entries) - 1:
                self._cursor = None
            return
        self._entries.append(entry)
        if self.max_entries is not None and len(self._entries) > self.max_entries:
            dropped = len(self._entries) - self.max_entries
            del self._entries[:dropped]
            logger.debug(f"Input history full, dropped {dropped} oldest entries")
        self._cursor = None

    def complete_up(self, current: str) -> str:
        """Step toward older entries."""
        if not self._entries:
            return current
        if self._cursor is None:
            self._cursor = len(self._entries) - 1
        elif self._cursor == 0:
            return current
        else:
            self._cursor -= 1
        return self._entries[self._cursor]

    def complete_down(self, current: str) -> str:
        """Step toward newer entries."""
        if self._cursor is None or self._cursor == len(self._entries) - 1:
            return current
        self._cursor += 1
        return self._entries[self._cursor]

    def reset(self):
        """Forget the recall position without touching the entries."""
        self._cursor = None
