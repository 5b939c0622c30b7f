"""Runtime configuration.

Values come from, highest priority first: constructor arguments, ``NEWSROOM_*``
environment variables (``__`` separates nested sections, e.g.
``NEWSROOM_AUTH__JWT__SECRET``), a ``.env`` file, and the YAML file named by
``NEWSROOM_CONFIG_FILE``.
"""

import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class Server(BaseModel):
    name: str = "Newsroom"
    version: str = "0.1.0"
    description: str = "Content-management backend for a multilingual news site"


class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///./newsroom.db"
    echo: bool = False
    create_schema: bool = True  # metadata.create_all on startup


class LoggingConfig(BaseModel):
    level: str = "INFO"
    # Level of the newsroom.authz audit logger; DEBUG also records every admitted request
    authz_level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file: str | None = None


class JwtConfig(BaseModel):
    secret: str = ""  # Must be set in production
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60


class PasswordConfig(BaseModel):
    bcrypt_rounds: int = 10


class BootstrapConfig(BaseModel):
    """The single SUPER_ADMIN account created on first startup.

    Bootstrap is skipped while super_admin_password is empty.
    """

    super_admin_email: str = "admin@example.com"
    super_admin_password: str = ""
    super_admin_full_name: str = "Super Admin"


class AuthConfig(BaseModel):
    jwt: JwtConfig = JwtConfig()
    password: PasswordConfig = PasswordConfig()
    bootstrap: BootstrapConfig = BootstrapConfig()


class Config(BaseSettings):
    server: Server = Server()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    auth: AuthConfig = AuthConfig()

    model_config = SettingsConfigDict(
        env_prefix="NEWSROOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = [init_settings, env_settings, dotenv_settings]
        config_file = os.environ.get("NEWSROOM_CONFIG_FILE")
        if config_file and Path(config_file).exists():
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=config_file))
        sources.append(file_secret_settings)
        return tuple(sources)


_HANDLER_NAME = "newsroom"
_QUIET_LOGGERS = ("httpx", "httpcore", "asyncio", "aiosqlite", "sqlalchemy.engine")


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler (stderr, or ``config.file``) and set levels.

    Safe to call more than once: a handler installed by an earlier call is replaced.
    """
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    handler.set_name(_HANDLER_NAME)

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.level)

    logging.getLogger("newsroom.authz").setLevel(config.authz_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
