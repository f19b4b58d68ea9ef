"""Application configuration via pydantic-settings.

All secrets are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """SQLite and Redis connection settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = Field(
        default="sqlite+aiosqlite:///./school.db",
        description="Async SQLAlchemy URL for the single-file school database",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection string (login rate limiting)",
    )


class SecuritySettings(BaseSettings):
    """Password hashing, session token and login throttling settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    jwt_secret: str = Field(
        default="dev-secret-key-change-in-prod",
        description="HS256 signing secret for session tokens",
    )
    jwt_algorithm: str = Field(default="HS256")
    token_ttl_hours: int = Field(default=24, description="Session token lifetime")
    bcrypt_rounds: int = Field(default=10, description="bcrypt work factor")
    default_password: str = Field(
        default="password123",
        description="Password assigned when an admin creates a user without one",
    )
    login_rate_limit: int = Field(default=10, description="Login attempts per window and email")
    login_rate_window: int = Field(default=300, description="Login rate-limit window in seconds")


class ServerSettings(BaseSettings):
    """HTTP server binding and CORS."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    cors_allowed_origins: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000",
        description="Comma-separated list of allowed browser origins",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


class BootstrapSettings(BaseSettings):
    """Default admin account and demo data seeding."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    admin_email: str = Field(default="admin@school.com")
    admin_name: str = Field(default="System Admin")
    admin_password: str = Field(default="password123")
    seed_demo_data: bool = Field(default=True, description="Seed demo records into an empty store")


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.db.database_url
        settings.security.token_ttl_hours
        settings.bootstrap.admin_email
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    db: DatabaseSettings = Field(default_factory=DatabaseSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    bootstrap: BootstrapSettings = Field(default_factory=BootstrapSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
