from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from errors import ConfigError

# Load variables from a local .env into the process environment (no error if missing).
load_dotenv()


class LogConfig(BaseSettings):
    """Settings the logger needs at import time; plain strings so loading never fails."""

    kana_seeder_log_level: str = Field(default="info", validation_alias="KANA_SEEDER_LOG_LEVEL")


class Config(LogConfig):
    """Pydantic-based settings loaded from process environment."""

    mongo_username: str = Field(default="", validation_alias="MONGO_USERNAME")
    mongo_password: str = Field(default="", validation_alias="MONGO_PASSWORD")
    mongo_cluster: str = Field(default="", validation_alias="MONGO_CLUSTER")
    mongo_app_name: str = Field(default="Cluster0", validation_alias="MONGO_APP_NAME")
    mongo_database: str = Field(default="jp_syllabaries", validation_alias="MONGO_DATABASE")
    mongo_collection: str = Field(default="kana_mappings", validation_alias="MONGO_COLLECTION")
    mongo_ping_timeout_ms: int = Field(default=5000, gt=0, validation_alias="MONGO_PING_TIMEOUT_MS")
    mongo_insert_timeout_ms: int = Field(default=30000, gt=0, validation_alias="MONGO_INSERT_TIMEOUT_MS")


REQUIRED_MONGO_SETTINGS: dict[str, str] = {
    "mongo_username": "MONGO_USERNAME",
    "mongo_password": "MONGO_PASSWORD",
    "mongo_cluster": "MONGO_CLUSTER",
}


def load_config() -> Config:
    """Read Config from the environment, reporting bad values as ConfigError."""
    try:
        return Config()
    except ValidationError as exc:
        invalid = [str(err["loc"][0]).upper() for err in exc.errors() if err.get("loc")]
        raise ConfigError(f"Invalid value for {', '.join(invalid)}", invalid=invalid) from exc


def require_mongo_settings(settings: Config) -> None:
    """Raise ConfigError naming every required MongoDB variable that is unset or blank."""
    missing = [
        env_name
        for field_name, env_name in REQUIRED_MONGO_SETTINGS.items()
        if not str(getattr(settings, field_name)).strip()
    ]
    if missing:
        raise ConfigError(f"{', '.join(missing)} must be set", missing=missing)


log_config = LogConfig()
