"""
Error handling and logging utilities for report publishing
"""
import logging
import traceback
from typing import Optional, Dict, Any
import sentry_sdk

logger = logging.getLogger(__name__)


class ReportPublishingException(Exception):
    """Base report publishing exception"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentException(ReportPublishingException, ValueError):
    """Invalid argument passed to the publisher"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class SerializationException(ReportPublishingException):
    """Report payload could not be encoded or decoded"""
    def __init__(self, message: str = "Report serialization failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class TransportException(ReportPublishingException):
    """Queue transport could not complete a send"""
    def __init__(self, message: str = "Queue transport failure", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class PublisherClosedException(ReportPublishingException, RuntimeError):
    """Publisher used after shutdown"""
    def __init__(self, message: str = "Report publisher has been shut down", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None):
    """
    Log error with context and send to Sentry if configured
    """
    error_context = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "traceback": traceback.format_exc(),
    }

    if isinstance(error, ReportPublishingException) and error.details:
        error_context["details"] = error.details

    if context:
        error_context.update(context)

    logger.error(f"Error occurred: {error_context}")

    # No-op when Sentry has not been initialised
    sentry_sdk.capture_exception(error, contexts={"custom": error_context})
