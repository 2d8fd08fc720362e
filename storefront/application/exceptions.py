class StoreUpstreamError(RuntimeError):
    """Raised when the hosted database fails (timeouts, network errors, error responses)."""
    pass


class NotificationError(RuntimeError):
    """Raised when an order notification could not be delivered."""
    pass


class PhoneNumberRequiredError(ValueError):
    """Raised when a payment is submitted without a phone number."""
    pass


class EmptyCartError(ValueError):
    """Raised when checkout is started with nothing in the cart."""
    pass


class CheckoutInProgressError(RuntimeError):
    """Raised when an action would interfere with a payment already under way."""
    pass


class InvalidCheckoutStateError(RuntimeError):
    """Raised when a checkout action is not valid for the current view."""
    pass


class AdminAccessDenied(PermissionError):
    """Raised when an admin action is attempted without an admin session."""
    pass


class InvalidCredentialsError(PermissionError):
    pass
