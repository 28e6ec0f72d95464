"""
Pool state value objects supplied by callers.
"""

from .pools import Amount, PoolSnapshot, Side

__all__ = ["Amount", "PoolSnapshot", "Side"]
