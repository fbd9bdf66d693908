"""
Collaborators the exporter depends on.

The exporter only sees these protocols; the host application passes in
whatever implements them. Simple local implementations are provided for
scripts and tests.
"""
import asyncio
import os
import sys
from typing import Iterable, List, Optional, Protocol


class WorkspaceService(Protocol):
    def workspace_roots(self) -> Iterable[str]: ...

    def has_workspace(self) -> bool: ...


class FileSystem(Protocol):
    async def file_exists(self, path: str) -> bool: ...


class InterpreterResolver(Protocol):
    async def usable_major_version(self) -> Optional[int]: ...


class CellMarkerMatcher(Protocol):
    def is_cell(self, line: str) -> bool: ...


class StaticWorkspace:
    """Workspace with a fixed list of root folders."""

    def __init__(self, roots: Iterable[str] = ()):
        self._roots: List[str] = [os.path.abspath(r) for r in roots]

    def workspace_roots(self) -> List[str]:
        return list(self._roots)

    def has_workspace(self) -> bool:
        return bool(self._roots)


class LocalFileSystem:
    async def file_exists(self, path: str) -> bool:
        return await asyncio.to_thread(os.path.isfile, path)


class CurrentInterpreter:
    """Reports the interpreter running this process."""

    async def usable_major_version(self) -> Optional[int]:
        return sys.version_info.major
