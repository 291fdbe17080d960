"""Win record storage used by the prize-interval service."""

from .dao import WinStore, WinStoreError
from .models import WinRecord

__all__ = ["WinStore", "WinStoreError", "WinRecord"]
