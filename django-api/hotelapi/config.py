"""Environment-driven configuration.

Values are read from the process environment and an optional .env file,
then copied into Django settings by hotelapi/settings.py.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Service configuration loaded from the environment."""

    secret_key: str = Field(
        default="django-insecure-hotels-api-dev-key", alias="DJANGO_SECRET_KEY"
    )
    debug: bool = Field(default=False, alias="DJANGO_DEBUG")
    allowed_hosts: str = Field(default="*", alias="DJANGO_ALLOWED_HOSTS")

    database_engine: str = Field(
        default="django.db.backends.sqlite3", alias="DATABASE_ENGINE"
    )
    database_name: str = Field(default="db.sqlite3", alias="DATABASE_NAME")
    database_user: str = Field(default="", alias="DATABASE_USER")
    database_password: str = Field(default="", alias="DATABASE_PASSWORD")
    database_host: str = Field(default="", alias="DATABASE_HOST")
    database_port: str = Field(default="", alias="DATABASE_PORT")

    jwt_secret: str = Field(default="hotels-api-dev-jwt-secret", alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expiration_hours: int = Field(default=24, alias="JWT_EXPIRATION_HOURS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allowed_hosts_list(self) -> list[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]


app_settings = AppSettings()
