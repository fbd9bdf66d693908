"""Console layer - helpers for the interactive input/output window."""
from .stream_text import format_stream_text
from .input_history import InputHistory

__all__ = ['format_stream_text', 'InputHistory']
