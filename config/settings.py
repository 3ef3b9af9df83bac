from datetime import timedelta
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load .env file into os.environ BEFORE pydantic reads it
load_dotenv()


class Settings(BaseSettings):
    # Token signing (required, see TokenConfig.from_settings)
    ACCESS_TOKEN_SECRET_KEY: Optional[str] = None
    ACCESS_TOKEN_EXPIRES_HOURS: int = 12
    JWT_ALGORITHM: str = "HS256"

    # Password hashing work factor
    BCRYPT_ROUNDS: int = 10

    # Database
    DATABASE_URL: str = "sqlite:///./resume.db"

    # Server
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    ALLOWED_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # ignore unknown env vars instead of raising errors
    )


class ConfigurationError(RuntimeError):
    """Raised when required process configuration is missing or invalid."""


class TokenConfig(BaseModel):
    """Signing configuration handed to TokenService at construction."""

    secret_key: str
    algorithm: str = "HS256"
    expires_in: timedelta = timedelta(hours=12)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenConfig":
        """Build from process settings; an absent secret is a startup error."""
        if not settings.ACCESS_TOKEN_SECRET_KEY:
            raise ConfigurationError("ACCESS_TOKEN_SECRET_KEY is not configured")
        return cls(
            secret_key=settings.ACCESS_TOKEN_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expires_in=timedelta(hours=settings.ACCESS_TOKEN_EXPIRES_HOURS),
        )


settings = Settings()
