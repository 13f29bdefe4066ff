"""Bodha relay — FastAPI ↔ Cerebras chat bridge."""

__version__ = "0.1.0"
