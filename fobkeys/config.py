"""Configuration management with Pydantic settings."""

from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fobkeys.errors import InvalidKey
from fobkeys.utils.crypto import read_key_file
from fobkeys.utils.license_url import is_valid_scheme


class Settings(BaseSettings):
    """fobkeys configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="FOBKEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    private_key_path: Path | None = Field(
        default=None,
        description="PEM file holding the DSA private key used to generate keys",
    )

    private_key_password: SecretStr | None = Field(
        default=None,
        description="Passphrase for an encrypted private key PEM",
    )

    public_key_path: Path | None = Field(
        default=None,
        description="PEM file holding the DSA public key used to verify keys",
    )

    url_scheme: str | None = Field(
        default=None,
        description="Custom URL scheme for registration links (e.g. com.example.app.lic)",
    )

    @field_validator("url_scheme")
    @classmethod
    def _check_url_scheme(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_scheme(value):
            raise ValueError(f"invalid URL scheme: {value!r}")
        return value

    def get_private_key_password(self) -> bytes | None:
        """Return the private key passphrase as bytes, if configured."""
        if self.private_key_password is None:
            return None
        return self.private_key_password.get_secret_value().encode("utf-8")

    def read_private_key_pem(self, path: Path | None = None) -> bytes:
        """Read the private key PEM from ``path`` or the configured location.

        Raises:
            InvalidKey: If no path is configured or the file cannot be read
        """
        key_path = path if path is not None else self.private_key_path
        if key_path is None:
            raise InvalidKey(
                "No private key configured. Pass --private-key or set FOBKEYS_PRIVATE_KEY_PATH."
            )
        try:
            return read_key_file(key_path, private=True)
        except OSError as exc:
            raise InvalidKey(f"Cannot read private key file {key_path}: {exc}") from exc

    def read_public_key_pem(self, path: Path | None = None) -> bytes:
        """Read the public key PEM from ``path`` or the configured location.

        Raises:
            InvalidKey: If no path is configured or the file cannot be read
        """
        key_path = path if path is not None else self.public_key_path
        if key_path is None:
            raise InvalidKey(
                "No public key configured. Pass --public-key or set FOBKEYS_PUBLIC_KEY_PATH."
            )
        try:
            return read_key_file(key_path)
        except OSError as exc:
            raise InvalidKey(f"Cannot read public key file {key_path}: {exc}") from exc


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
