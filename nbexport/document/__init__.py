"""Document layer - Data models for session cells and exported notebooks."""
from .cell import (
    Cell, CodeCell, MarkdownCell, SystemInfoCell, CellType, CellState, to_lines
)
from .notebook import NotebookDocument
from .session import NotebookSession
from .serialization import document_to_json, cell_from_dict, load_cells

__all__ = [
    'Cell', 'CodeCell', 'MarkdownCell', 'SystemInfoCell', 'CellType', 'CellState', 'to_lines',
    'NotebookDocument',
    'NotebookSession',
    'document_to_json', 'cell_from_dict', 'load_cells'
]
