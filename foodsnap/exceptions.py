"""
Error taxonomy for the enhancement engine.

Angle classification never raises (it degrades instead), so nothing here
covers it. Everything below propagates to the caller, who owns any retry
affordance.
"""
from typing import Optional


class FoodsnapError(Exception):
    """Base class for engine errors"""
    pass


class ConfigurationError(FoodsnapError):
    """Missing credentials or provider configuration. Fatal, never retried."""
    pass


class ProviderError(FoodsnapError):
    """
    The external provider rejected the request.

    Args:
        message: Raw provider message (kept verbatim for logs and callers)
        status: HTTP-like status code, if the provider returned one
        user_message: Translated, user-actionable message
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.user_message = user_message or message


class BillingDisabledError(ProviderError):
    """Provider project has billing disabled"""
    pass


class EnhancementTimeoutError(FoodsnapError):
    """An operation exceeded its bound. Callers may offer 'retry later'."""

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message


class EditTimeoutError(EnhancementTimeoutError):
    """The edit provider call exceeded the request timeout"""
    pass


class PublishTimeoutError(EnhancementTimeoutError):
    """The container stayed IN_PROGRESS for every polling attempt"""

    def __init__(self, container_id: str, attempts: int):
        super().__init__(
            f"Container {container_id} still IN_PROGRESS after {attempts} attempts",
            user_message="Media processing timed out. Please try publishing again later."
        )
        self.container_id = container_id
        self.attempts = attempts


class SelectionError(FoodsnapError):
    """Style selection cannot proceed (business type missing)"""
    pass
