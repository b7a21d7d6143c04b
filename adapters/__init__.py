from .base import BaseAdapter
from .yahoo import YahooHistoryAdapter
from .fred import FredAdapter

__all__ = [
    "BaseAdapter",
    "YahooHistoryAdapter",
    "FredAdapter",
]
