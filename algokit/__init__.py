"""Small classic algorithms and data structures: sequences, heaps, trees, hash maps and string utilities."""

__version__ = "0.1.0"