"""Cell data model: code, markdown and system-info variants."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Any, List, Union, ClassVar
import uuid


class CellType(str, Enum):
    """Type of cell content."""
    CODE = "code"
    MARKDOWN = "markdown"
    SYS_INFO = "sys_info"


class CellState(str, Enum):
    """Execution state of a cell."""
    PENDING = "pending"
    RUNNING = "running"
    FINISHED = "finished"
    ERROR = "error"


Source = Union[str, List[str]]


def to_lines(source: Source) -> List[str]:
    """
    Normalize cell source to a list of lines.

    Every line keeps its trailing newline; only the last one may lack it.
    A list is taken as already split and copied.
    """
    if isinstance(source, str):
        if not source:
            return []
        parts = source.split('\n')
        lines = [p + '\n' for p in parts[:-1]]
        if parts[-1]:
            lines.append(parts[-1])
        return lines
    return list(source)


def new_cell_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Cell:
    """
    A single unit of notebook content.

    Only the concrete variants below are instantiated; the base class holds
    the fields they share. ``source`` is always stored as a list of lines.
    ``id`` must not be reassigned once the cell is in a session.
    """
    cell_type: ClassVar[CellType]

    source: Source = ""
    id: str = field(default_factory=new_cell_id)

    # Provenance, empty for synthetic cells
    origin_file: str = ""
    origin_line: int = 0

    state: CellState = CellState.PENDING
    outputs: List[Any] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    def __post_init__(self):
        self.source = to_lines(self.source)

    @property
    def text(self) -> str:
        """Source joined back into a single string."""
        return ''.join(self.source)

    @property
    def first_line(self) -> Optional[str]:
        return self.source[0] if self.source else None


@dataclass
class CodeCell(Cell):
    cell_type: ClassVar[CellType] = CellType.CODE

    execution_count: Optional[int] = None


@dataclass
class MarkdownCell(Cell):
    cell_type: ClassVar[CellType] = CellType.MARKDOWN


@dataclass
class SystemInfoCell(Cell):
    """
    Synthetic diagnostic cell describing the session's interpreter.

    Shown in the interactive window only. Exported documents never
    contain it, but its ``version`` feeds the notebook metadata.
    """
    cell_type: ClassVar[CellType] = CellType.SYS_INFO

    version: str = ""
    notebook_version: str = ""
    path: str = ""
    message: str = ""
    connection: str = ""


CELL_CLASSES = {
    CellType.CODE: CodeCell,
    CellType.MARKDOWN: MarkdownCell,
    CellType.SYS_INFO: SystemInfoCell,
}
