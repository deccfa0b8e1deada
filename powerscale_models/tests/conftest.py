import os

import pytest


@pytest.fixture(autouse=True)
def clean_env():
    """Ensure no config is loaded from env during tests."""
    vars_to_clear = [
        "DEBUG",
        "PLAN_OUTPUT_FORMAT",
        "POWERSCALE_MODELS_CONFIG_PATH",
        "SENTRY_DSN",
        "SENTRY_ENVIRONMENT",
        "SENTRY_TRACES_SAMPLE_RATE",
    ]
    stashed = {}
    for var in vars_to_clear:
        if var in os.environ:
            stashed[var] = os.environ.pop(var)

    yield

    for var, val in stashed.items():
        os.environ[var] = val
