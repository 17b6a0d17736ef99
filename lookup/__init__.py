"""Lookup layer - dictionary API clients."""
from .jisho_client import JishoClient

__all__ = ["JishoClient"]
