"""Exported notebook document."""
import copy
from dataclasses import dataclass, field
from typing import Tuple, Dict, Any

NBFORMAT = 4
NBFORMAT_MINOR = 2


def build_metadata(major_version: int) -> Dict[str, Any]:
    """Notebook-level metadata stamped with the interpreter major version."""
    return {
        'language_info': {
            'name': 'python',
            'codemirror_mode': {
                'name': 'ipython',
                'version': major_version
            }
        },
        'orig_nbformat': 2,
        'file_extension': '.py',
        'mimetype': 'text/x-python',
        'name': 'python',
        'npconvert_exporter': 'python',
        'pygments_lexer': f'ipython{major_version}',
        'version': major_version
    }


@dataclass(frozen=True)
class NotebookDocument:
    """
    A Jupyter notebook produced by an export.

    Built fresh on every export and never mutated afterwards. Writing it
    anywhere is up to the caller (see ``serialization.document_to_json``).
    ``to_dict`` hands out copies. Documents are compared by value and are
    not hashable.
    """
    __hash__ = None
    cells: Tuple[Dict[str, Any], ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict)
    nbformat: int = NBFORMAT
    nbformat_minor: int = NBFORMAT_MINOR

    @property
    def major_version(self) -> int:
        return self.metadata.get('version', 3)

    def to_dict(self) -> dict:
        """Convert to the plain ipynb structure."""
        return {
            'cells': copy.deepcopy(list(self.cells)),
            'metadata': copy.deepcopy(self.metadata),
            'nbformat': self.nbformat,
            'nbformat_minor': self.nbformat_minor
        }
