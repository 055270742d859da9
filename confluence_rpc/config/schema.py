"""Configuration schema using Pydantic.

Values come from (highest first): explicit arguments, ``CONF_*`` environment
variables, the JSON config file, and the defaults below.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "CONF_"
DEFAULT_API_VERSION = "confluence1"
DEFAULT_ENCODING = "utf-8"
DEFAULT_TIMEOUT = 600.0
DEFAULT_ATTACHMENT_COMMENT = "Uploaded via confluence-rpc"


class ClientConfig(BaseSettings):
    """Connection settings for a Confluence XML-RPC endpoint."""
    url: str = ""  # e.g. https://wiki.example.com/rpc/xmlrpc
    username: str = ""  # empty means anonymous access
    password: str = Field(default="", repr=False)
    api_version: str = DEFAULT_API_VERSION  # remote method namespace prefix
    encoding: str = DEFAULT_ENCODING  # XML encoding declared in request bodies
    timeout: float = DEFAULT_TIMEOUT  # seconds, per request
    verify_ssl: bool = True
    user_agent: str = ""  # empty uses the package default
    trace: bool = False  # verbose call/argument/result logging
    attachment_content_type: str = "application/octet-stream"
    attachment_comment: str = DEFAULT_ATTACHMENT_COMMENT

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        env_ignore_empty=True,
    )

    @field_validator("api_version", "encoding")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value
