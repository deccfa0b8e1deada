"""Sentry configuration and initialization module."""

import logging
from typing import Optional

from powerscale_models.config.sentry import SentryConfig

logger = logging.getLogger(__name__)


def initialize_sentry(
    sentry_config: SentryConfig,
    release: Optional[str] = None,
) -> bool:
    """Initialize Sentry SDK; returns True when error tracking is enabled."""
    if not sentry_config.dsn:
        logger.info("Sentry DSN not provided - error tracking disabled")
        return False

    try:
        import sentry_sdk
        from sentry_sdk.integrations.logging import LoggingIntegration

        sentry_sdk.init(
            dsn=str(sentry_config.dsn),
            environment=sentry_config.environment,
            traces_sample_rate=sentry_config.traces_sample_rate,
            release=release,
            integrations=[
                LoggingIntegration(
                    level=logging.INFO,  # breadcrumbs
                    event_level=logging.ERROR,  # events
                ),
            ],
            send_default_pii=False,
        )
    except ImportError:
        logger.error("Sentry SDK not installed. Install with: pip install sentry-sdk")
        return False
    except Exception as e:
        logger.error("Failed to initialize Sentry: %s", e, exc_info=True)
        return False

    logger.info(
        "Sentry initialized successfully (environment: %s)",
        sentry_config.environment,
    )
    return True
