"""Education Centre roster: in-memory Teacher / Admin / Student records."""

__version__ = "1.0.0"
