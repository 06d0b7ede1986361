"""
Error tracking with Sentry
"""
import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration


def init_sentry(settings) -> bool:
    """
    Initialize Sentry for error tracking

    Returns True when a DSN is configured and Sentry was started.
    """
    if not settings.SENTRY_DSN:
        return False

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        integrations=[
            LoggingIntegration(),
        ],
        # Full sampling in development, 10% elsewhere
        traces_sample_rate=1.0 if settings.ENVIRONMENT == "development" else 0.1,
        release=settings.APP_VERSION,
    )
    return True
