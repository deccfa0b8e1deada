import os
from pathlib import Path
from typing import Any, Optional, Tuple, Type

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource as PydanticYamlConfigSettingsSource,
)

from powerscale_models.config.sentry import SentryConfig
from powerscale_models.enums import OutputFormat

CONFIG_PATH_ENV = "POWERSCALE_MODELS_CONFIG_PATH"


class ModelsConfig(BaseSettings):
    """Configuration for the plan tooling.

    Loads configuration from:
    1. Init arguments
    2. Environment variables (specific aliases only)
    3. YAML file named by POWERSCALE_MODELS_CONFIG_PATH
    4. Defaults
    """

    debug: bool = Field(default=False, alias="DEBUG")
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT, alias="PLAN_OUTPUT_FORMAT"
    )
    sentry: Optional[SentryConfig] = Field(default_factory=SentryConfig)

    model_config = SettingsConfigDict(
        # Env vars are read through the aliases only.
        env_nested_delimiter=None,
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Define configuration source priority."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


class YamlConfigSettingsSource(PydanticYamlConfigSettingsSource):
    """YAML settings source whose path comes from the environment."""

    def __init__(self, settings_cls: Type[BaseSettings]):
        config_path = os.getenv(CONFIG_PATH_ENV)
        yaml_file = Path(config_path) if config_path else None
        super().__init__(settings_cls, yaml_file=yaml_file)

    def __call__(self) -> dict[str, Any]:
        d = super().__call__()

        # Accept flat sentry_* keys next to the nested form
        if "sentry" not in d and "sentry_dsn" in d:
            d["sentry"] = {
                "dsn": d.get("sentry_dsn"),
                "environment": d.get("sentry_environment"),
                "traces_sample_rate": d.get("sentry_traces_sample_rate"),
            }

        return d
