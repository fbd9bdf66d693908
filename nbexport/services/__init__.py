"""Services layer - Notebook export and its collaborators."""

from .exporter import NotebookExporter
from .cell_matcher import CellMatcher
from .collaborators import (
    WorkspaceService,
    FileSystem,
    InterpreterResolver,
    StaticWorkspace,
    LocalFileSystem,
    CurrentInterpreter,
)
from .export_config import ExportConfig, load_config, get_config, reset_config_cache
from .localize import localize

__all__ = [
    # exporter
    "NotebookExporter",
    "CellMatcher",
    # collaborators
    "WorkspaceService",
    "FileSystem",
    "InterpreterResolver",
    "StaticWorkspace",
    "LocalFileSystem",
    "CurrentInterpreter",
    # config
    "ExportConfig",
    "load_config",
    "get_config",
    "reset_config_cache",
    "localize",
]
