"""Session data model: the ordered cells of one interactive console."""
from dataclasses import dataclass, field
from typing import Optional, List, Iterator
import uuid

from .cell import Cell, CellType, CellState, CodeCell, SystemInfoCell
from ..console.input_history import InputHistory
from ..services.export_config import get_config


@dataclass
class NotebookSession:
    """
    The cells executed in one interactive console, in submission order.

    Also owns the console's input history, which lives and dies with
    the session.
    """
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    cells: List[Cell] = field(default_factory=list)
    history: InputHistory = field(
        default_factory=lambda: InputHistory.from_config(get_config().history)
    )

    def get_cell(self, cell_id: str) -> Optional[Cell]:
        """Get cell by ID."""
        return next((c for c in self.cells if c.id == cell_id), None)

    def get_cell_index(self, cell_id: str) -> int:
        """Get index of cell, -1 if not found."""
        return next((i for i, c in enumerate(self.cells) if c.id == cell_id), -1)

    def add_cell(self, cell: Cell) -> Cell:
        """Append a cell. Ids must be unique within the session."""
        if self.get_cell_index(cell.id) >= 0:
            raise ValueError(f"Duplicate cell id: {cell.id}")
        self.cells.append(cell)
        return cell

    def submit(self, code: str, origin_file: str = "", origin_line: int = 0) -> CodeCell:
        """Record typed input as a new pending code cell."""
        self.history.add(code)
        return self.add_cell(CodeCell(
            source=code,
            origin_file=origin_file,
            origin_line=origin_line
        ))

    def set_state(self, cell_id: str, state: CellState) -> bool:
        """Update a cell's execution state. Returns False if not found."""
        cell = self.get_cell(cell_id)
        if cell is None:
            return False
        cell.state = state
        return True

    def iter_type(self, cell_type: CellType) -> Iterator[Cell]:
        for cell in self.cells:
            if cell.cell_type == cell_type:
                yield cell

    def code_cells(self) -> List[Cell]:
        """Get all code cells."""
        return list(self.iter_type(CellType.CODE))

    def sys_info_cells(self) -> List[SystemInfoCell]:
        return list(self.iter_type(CellType.SYS_INFO))

    def finished_cells(self) -> List[Cell]:
        """Cells that are worth exporting: finished or failed, never in flight."""
        return [c for c in self.cells
                if c.state in (CellState.FINISHED, CellState.ERROR)]
