"""
Portfolio Service - Exceptions
"""
from typing import Optional


class PortfolioError(Exception):
    """Base exception for portfolio service errors"""
    pass


class NotFoundError(PortfolioError):
    """Raised when an entity is not found by id or username"""
    pass


class ConflictError(PortfolioError):
    """Raised when a write would break a uniqueness constraint"""
    pass


class AccessDeniedError(PortfolioError):
    """Raised when the caller lacks the required authority"""
    pass


class IdentityProviderError(PortfolioError):
    """Raised when a call to the identity provider fails"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
