"""SAAT — static accessibility auditing of Vue single-file components."""

__version__ = "0.1.0"
