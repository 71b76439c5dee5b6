"""Error taxonomy for hotel operations"""

from typing import Optional


class HotelOpsError(Exception):
    """Base exception for hotel-ops errors"""
    pass


# ==================== Local validation ====================


class LocalValidationError(HotelOpsError):
    """Input rejected before any request is sent"""
    pass


class ItemUnavailableError(LocalValidationError):
    """Catalog item or room is not available"""

    def __init__(self, item_id: str, name: Optional[str] = None):
        self.item_id = item_id
        super().__init__(f"{name or item_id} is not available")


class EmptyCartError(LocalValidationError):
    """Order submission requested for an empty cart"""

    def __init__(self):
        super().__init__("Cart is empty")


class MissingDestinationError(LocalValidationError):
    """Order submission without a room number"""

    def __init__(self):
        super().__init__("Please enter your room number")


class InvalidRangeError(LocalValidationError):
    """Check-out is not after check-in"""
    pass


class InvalidRateError(LocalValidationError):
    """Nightly rate is negative"""
    pass


# ==================== Gateway ====================


class GatewayError(HotelOpsError):
    """Base exception for remote API failures"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NetworkError(GatewayError):
    """No response received from the backend"""
    pass


class AuthError(GatewayError):
    """Backend rejected the credentials (HTTP 401)"""
    pass


class ValidationError(GatewayError):
    """Backend rejected the request (HTTP 4xx) or returned an unexpected shape"""
    pass


class NotFoundError(ValidationError):
    """Lookup or update matched no rows"""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=404)


class ServerError(GatewayError):
    """Backend failed (HTTP 5xx)"""
    pass


class StaleResultError(HotelOpsError):
    """Result arrived after a newer request superseded it"""
    pass
