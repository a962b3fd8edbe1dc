"""Error taxonomy shared by use cases and the API layer"""

from typing import Optional


class MarketplaceError(Exception):
    """Base exception for SiteMarket"""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(MarketplaceError):
    """Malformed or out-of-range input"""
    status_code = 400


class AuthError(MarketplaceError):
    """Bad credentials or unauthenticated caller"""
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(MarketplaceError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class ConflictError(MarketplaceError):
    """Duplicate value for a unique field"""
    status_code = 409


class FetchError(MarketplaceError):
    """Upstream site could not be fetched while generating a listing"""
    status_code = 422

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"Could not fetch the URL ({reason}). Please check the URL and try again, "
            "or fill in the form manually."
        )


class RateLimitError(MarketplaceError):
    status_code = 429

    def __init__(self, message: str, retry_after: Optional[int] = None):
        self.retry_after = retry_after
        super().__init__(message)


class ConfigurationError(MarketplaceError):
    """A required external integration (storage, email) is not configured"""
    status_code = 503


class IncorrectPasswordError(AuthError):
    """Wrong current password from an already-authenticated caller"""
    status_code = 400

    def __init__(self, message: str = "Current password is incorrect."):
        super().__init__(message)
