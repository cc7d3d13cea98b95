"""Configuration management using pydantic-settings."""

from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .exceptions import ConfigurationError
from .signature import HMAC_SHA1, CallableSignature, SignatureStrategy


class OAuth1Settings(BaseSettings):
    """OAuth1 signer settings.

    Values passed to the constructor win over ``OAUTH1_*`` environment
    variables and the ``.env`` file. Instances are frozen.
    """

    model_config = SettingsConfigDict(
        env_prefix="OAUTH1_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
        extra="forbid",
    )

    # OAuth1 credentials
    consumer_key: str
    consumer_secret: str
    token: str = ""
    token_secret: str = ""

    # Algorithm
    signature_method: str = HMAC_SHA1
    version: str = "1.0"
    signer_override: Any = None

    # Optional protocol parameters
    callback: str | None = None
    verifier: str | None = None
    realm: str | None = None

    @field_validator("consumer_key", "consumer_secret")
    @classmethod
    def _require_credential(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("signer_override")
    @classmethod
    def _coerce_strategy(cls, value: Any) -> SignatureStrategy | None:
        if value is None or isinstance(value, SignatureStrategy):
            return value
        if callable(value):
            return CallableSignature(value)
        raise ValueError("must be a SignatureStrategy or a (base_string, key) callable")


class ExplicitSettings(OAuth1Settings):
    """OAuth1 settings built only from the values passed in.

    Environment variables and the ``.env`` file are ignored.
    """

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


def get_settings(*, from_environment: bool = True, **values: Any) -> OAuth1Settings:
    """Build validated settings.

    Args:
        from_environment: Whether omitted options fall back to ``OAUTH1_*``
            environment variables and the ``.env`` file before the defaults.
        **values: Explicit option values.

    Raises:
        ConfigurationError: If required credentials are missing or an option
            is invalid.
    """
    try:
        settings_cls = OAuth1Settings if from_environment else ExplicitSettings
        return settings_cls(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid OAuth1 configuration: {e}") from e
