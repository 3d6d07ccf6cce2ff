"""Documents package initialization."""

from .DocumentBase import DocumentBase
from .AppStateDocument import AppStateDocument

__all__ = ["DocumentBase", "AppStateDocument"]
