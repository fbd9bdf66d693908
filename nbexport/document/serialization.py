"""
Notebook serialization to/from .ipynb format.

Exported documents are plain JSON; reading back uses execnb.nbio so a
notebook saved by any Jupyter front end can be loaded into session cells.
"""
from pathlib import Path
from typing import Union, List, Dict, Any
import json

from execnb.nbio import read_nb

from .cell import Cell, CellType, CellState, CELL_CLASSES, to_lines
from .notebook import NotebookDocument


def document_to_json(document: NotebookDocument) -> str:
    """Serialize a document the way Jupyter writes .ipynb files."""
    return json.dumps(document.to_dict(), indent=1, ensure_ascii=False) + "\n"


def cell_from_dict(jcell: Dict[str, Any]) -> Cell:
    """
    Convert a Jupyter cell dict to a session Cell.

    Only code and markdown cells exist in notebooks; anything else raises
    ValueError.
    """
    cell_type_str = jcell.get('cell_type', 'code')
    try:
        cell_type = CellType(cell_type_str)
    except ValueError:
        raise ValueError(f"Unknown cell type: {cell_type_str!r}")
    if cell_type == CellType.SYS_INFO:
        raise ValueError("sys_info cells are never stored in notebooks")

    source = jcell.get('source', '')
    kwargs = dict(
        source=to_lines(source if isinstance(source, str) else ''.join(source)),
        state=CellState.FINISHED,
        metadata=dict(jcell.get('metadata') or {}),
    )
    if cell_type == CellType.CODE:
        kwargs['outputs'] = [dict(o) for o in jcell.get('outputs') or []]
        kwargs['execution_count'] = jcell.get('execution_count')

    return CELL_CLASSES[cell_type](**kwargs)


def load_cells(source: Union[NotebookDocument, Dict[str, Any], str, Path]) -> List[Cell]:
    """
    Re-load the cells of an exported notebook.

    Accepts a NotebookDocument, its dict form, or a path to an .ipynb file.
    """
    if isinstance(source, NotebookDocument):
        jcells = source.to_dict()['cells']
    elif isinstance(source, dict):
        jcells = source.get('cells', [])
    else:
        jcells = read_nb(Path(source)).cells
    return [cell_from_dict(c) for c in jcells]
