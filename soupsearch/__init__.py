"""Candidates, candidate distillation, sigproc angle formatting and search options for pulsar acceleration searches."""

__version__ = "1.0.0"

__all__ = ["angles", "candidates", "distiller", "cmdline"]