from powerscale_models.config.main import CONFIG_PATH_ENV, ModelsConfig
from powerscale_models.config.sentry import SentryConfig

__all__ = [
    "CONFIG_PATH_ENV",
    "ModelsConfig",
    "SentryConfig",
]
