"""
Domain Models
"""

from .account import NewAccount

__all__ = [
    "NewAccount",
]
