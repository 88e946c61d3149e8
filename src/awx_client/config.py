"""Configuration and logging setup for the AWX client."""

import logging
import os
import pathlib
from typing import Literal

import pydantic
import structlog

from . import rest
from .client import AwxClient

CONFIG_ENV_VAR = "AWX_CLIENT_CONFIG_PATH"
logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Connection settings for an AWX server.

    Exactly one credential form must be set: ``username`` with
    ``password``, ``token``, or ``token_file``.
    """

    base_url: str = pydantic.Field(description="Base URL of the AWX server")
    username: str | None = pydantic.Field(None, description="Basic auth username")
    password: str | None = pydantic.Field(None, description="Basic auth password")
    token: str | None = pydantic.Field(None, description="OAuth2 bearer token")
    token_file: str | None = pydantic.Field(
        None,
        description="Path to file containing the bearer token",
    )
    timeout: float = pydantic.Field(
        rest.DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    verify_ssl: bool = pydantic.Field(True, description="Verify TLS certificates")
    log_level: str = pydantic.Field("INFO", description="Logging level")
    log_format: Literal["logfmt", "json"] = pydantic.Field(
        "logfmt",
        description="Rendering of log events",
    )

    @pydantic.model_validator(mode="after")
    def _check_credentials(self) -> "ClientConfig":
        if self.password is not None and self.username is None:
            msg = "password given without username"
            raise ValueError(msg)
        forms = [
            self.username is not None,
            self.token is not None,
            self.token_file is not None,
        ]
        if sum(forms) != 1:
            msg = "exactly one of username/password, token or token_file is required"
            raise ValueError(msg)
        if self.username is not None and self.password is None:
            msg = "username given without password"
            raise ValueError(msg)
        return self

    def build_auth(self) -> rest.AuthProvider:
        """Create the authentication provider these settings describe.

        Raises:
            FileNotFoundError: If token_file does not exist.
        """
        if self.username is not None:
            return rest.BasicAuth(self.username, self.password or "")
        if self.token is not None:
            return rest.TokenAuth(self.token)

        token_path = pathlib.Path(self.token_file or "")
        if not token_path.exists():
            msg = f"Token file not found: {self.token_file}"
            raise FileNotFoundError(msg)
        return rest.TokenAuth(token_path.read_text().strip())


def configure_logging(log_level_name: str, log_format: str = "logfmt") -> None:
    """Configure structlog for logfmt or JSON output on stdout.

    Applications embedding the client usually configure structlog
    themselves and never need to call this.
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.processors.LogfmtRenderer(key_order=("timestamp", "level", "msg"))
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str) -> ClientConfig:
    """Load and validate configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file is not valid JSON or the
            settings are invalid.
    """
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    return ClientConfig.model_validate_json(path.read_text())


def create_client(config: ClientConfig) -> AwxClient:
    """Construct a client from validated config."""
    client = AwxClient(
        config.base_url,
        config.build_auth(),
        timeout=config.timeout,
        verify_ssl=config.verify_ssl,
    )
    logger.info("Created AWX client", base_url=client.base_url)
    return client


def client_from_env(
    config_path: str | None = None,
    *,
    setup_logging: bool = True,
) -> AwxClient:
    """Create a client using a config path or the environment default.

    Logging is configured from the file unless setup_logging is False.
    """
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not resolved_path:
        msg = f"No configuration path given and {CONFIG_ENV_VAR} is not set"
        raise ValueError(msg)
    config = load_config(resolved_path)
    if setup_logging:
        configure_logging(config.log_level, config.log_format)
    return create_client(config)
