"""nbexport - export interactive notebook sessions to Jupyter notebooks."""

__version__ = "0.1.0"
