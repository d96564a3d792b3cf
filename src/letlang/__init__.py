"""letlang: lexical scanner for a small expression language."""

__version__ = "0.1.0"
