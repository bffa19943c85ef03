"""Score aggregation service.

Holds the running aggregate that the HTTP routes read, fold new results
into, and clear. Kept free of Flask imports so it can be driven directly
from tests.
"""

from .store import ScoreStore

__all__ = ['ScoreStore']
