"""
Notebook exporter - turns the cells of an interactive session into a
Jupyter notebook document.

The exporter:
1. Optionally prepends a cell that changes the working directory back to
   the workspace root, so relative data paths resolve the same way when the
   notebook is run from its own folder
2. Derives the interpreter major version from the first system-info cell,
   falling back to the interpreter resolver
3. Drops system-info cells and strips the leading cell marker (``# %%``)
   from every remaining cell
"""
import copy
import logging
import os
from pathlib import PurePath
from typing import Iterable, List, Optional, Dict, Any

from ..document.cell import Cell, CodeCell, MarkdownCell, SystemInfoCell, CellState
from ..document.notebook import NotebookDocument, build_metadata
from .cell_matcher import CellMatcher
from .collaborators import (
    WorkspaceService,
    FileSystem,
    InterpreterResolver,
    CellMarkerMatcher,
)
from .export_config import ExportConfig, get_config
from .localize import localize

logger = logging.getLogger(__name__)

CHANGE_DIRECTORY_SNIPPET = [
    "{comment}",
    "import os",
    "try:",
    "    os.chdir(os.path.join(os.getcwd(), {path}))",
    "    print(os.getcwd())",
    "except OSError:",
    "    pass",
    "",
]


def change_directory_source(relative_path: str, comment: str) -> str:
    """Source of the cell that changes into ``relative_path``."""
    path = PurePath(relative_path).as_posix()
    return "\n".join(CHANGE_DIRECTORY_SNIPPET).format(comment=comment, path=repr(path))


def prune_source(source: List[str], matcher: CellMarkerMatcher) -> List[str]:
    """Drop the first line if it is a cell marker. Nothing else is touched."""
    if source and matcher.is_cell(source[0]):
        return source[1:]
    return list(source)


def parse_major_version(version: str) -> Optional[int]:
    """
    Leading integer of a dotted version string.

    ``"3.9.1"`` gives 3. Returns None when the leading component is not a
    number.
    """
    head = version.split('.', 1)[0].strip()
    try:
        return int(head)
    except ValueError:
        return None


def export_cell(cell: Cell, matcher: CellMarkerMatcher) -> Dict[str, Any]:
    """Exported ipynb record for a code or markdown cell."""
    source = prune_source(cell.source, matcher)
    if isinstance(cell, CodeCell):
        return {
            'cell_type': 'code',
            'execution_count': cell.execution_count,
            'metadata': copy.deepcopy(cell.metadata),
            'outputs': copy.deepcopy(cell.outputs),
            'source': source
        }
    if isinstance(cell, MarkdownCell):
        return {
            'cell_type': 'markdown',
            'metadata': copy.deepcopy(cell.metadata),
            'source': source
        }
    raise ValueError(f"Cannot export cell of type {cell.cell_type.value}")


class NotebookExporter:
    """
    Builds notebook documents from session cells.

    Collaborators are passed in explicitly; the exporter keeps no state
    between calls.
    """

    def __init__(
        self,
        workspace: WorkspaceService,
        file_system: FileSystem,
        interpreters: InterpreterResolver,
        matcher: Optional[CellMarkerMatcher] = None,
        config: Optional[ExportConfig] = None
    ):
        self.config = config or get_config()
        self.workspace = workspace
        self.file_system = file_system
        self.interpreters = interpreters
        self.matcher = matcher or CellMatcher.from_config(self.config.cells)

    async def export(
        self,
        cells: Iterable[Cell],
        target_path: Optional[str] = None
    ) -> NotebookDocument:
        """
        Translate ``cells`` into a notebook.

        Args:
            cells: Session cells in execution order
            target_path: Where the notebook will be saved. When given, a
                directory-change cell may be prepended.

        Returns:
            A new NotebookDocument
        """
        cells = list(cells)

        if target_path and self.config.export.change_directory:
            cells = await self.add_directory_change_cell(cells, target_path)

        major_version = await self.extract_major_version(cells)

        return NotebookDocument(
            cells=tuple(self.prune_cells(cells)),
            metadata=build_metadata(major_version)
        )

    async def add_directory_change_cell(self, cells: List[Cell], target_path: str) -> List[Cell]:
        """Prepend a cell that changes into the workspace root, if one applies."""
        change_directory = await self.calculate_directory_change(target_path, cells)
        if not change_directory:
            return cells

        logger.debug(f"Adding directory change cell for {change_directory!r}")
        comment = localize("export_change_directory_comment", self.config.export.locale)
        cell = CodeCell(
            source=change_directory_source(change_directory, comment),
            state=CellState.FINISHED,
            execution_count=0
        )
        return [cell, *cells]

    async def first_workspace_folder(self, cells: List[Cell]) -> Optional[str]:
        """
        Workspace root containing the first real file that ran.

        Cells run from temporary files (the system-info cell, for one) are
        skipped because they do not exist on disk.
        """
        roots = list(self.workspace.workspace_roots())
        for cell in cells:
            filename = cell.origin_file
            if not filename or not os.path.isabs(filename):
                continue
            if not await self.file_system.file_exists(filename):
                continue
            for root in roots:
                if filename.lower().startswith(root.lower()):
                    return root
        return None

    async def calculate_directory_change(self, target_path: str, cells: List[Cell]) -> Optional[str]:
        """
        Relative path from the notebook's folder to the workspace root.

        Returns None when no workspace is open, no cell came from it, or no
        relative form exists (different drives or network shares).
        """
        if not self.workspace.has_workspace():
            return None

        notebook_dir = os.path.dirname(target_path)
        workspace_path = await self.first_workspace_folder(cells)
        if not workspace_path or not os.path.isabs(workspace_path):
            return None
        if not notebook_dir or not os.path.isabs(notebook_dir):
            return None

        try:
            relative = os.path.relpath(workspace_path, notebook_dir)
        except ValueError:
            return None

        if relative == os.curdir or os.path.isabs(relative):
            return None
        return relative

    async def extract_major_version(self, cells: List[Cell]) -> int:
        """Interpreter major version for the notebook metadata."""
        sys_info = next((c for c in cells if isinstance(c, SystemInfoCell)), None)
        if sys_info is not None and sys_info.version:
            major = parse_major_version(sys_info.version)
            if major is not None:
                return major
            logger.info(f"Unparseable version in sys_info cell: {sys_info.version!r}")

        logger.info("Failed to find python main version from sys_info cell")

        major = await self.interpreters.usable_major_version()
        if major is not None:
            return major
        return self.config.export.default_major_version

    def prune_cells(self, cells: List[Cell]) -> List[Dict[str, Any]]:
        # Jupyter doesn't understand sys_info cells
        return [export_cell(c, self.matcher) for c in cells
                if not isinstance(c, SystemInfoCell)]
