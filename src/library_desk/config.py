"""Configuration management for Library Desk.

Settings come from (highest priority first):
1. Keyword arguments passed to ``LibraryConfig``
2. ``LIBRARY_DESK_*`` environment variables
3. A local ``.env`` file
4. The defaults below

Entry points build one ``LibraryConfig`` and pass it along; there is no
module-level instance.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibraryConfig(BaseSettings):
    """Library Desk settings shared by the console and MCP drivers."""

    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_DESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Library ===

    library_name: str = Field(
        default="Central Library",
        description="Name shown in listings and statistics",
        min_length=1,
    )

    seed_sample_data: bool = Field(
        default=True,
        description="Register the sample books at startup",
    )

    # === MCP Server Metadata ===

    server_name: str = Field(
        default="library-desk",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Server version reported to clients",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    transport: str = Field(
        default="stdio",
        description="MCP transport",
        pattern=r"^stdio$",
    )

    # === Logging ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("library_name")
    @classmethod
    def validate_library_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Library name cannot be blank")
        return v

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    @property
    def is_development(self) -> bool:
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def server_info(self) -> dict[str, str]:
        """Server identification sent during the MCP handshake."""
        return {
            "name": self.server_name,
            "version": self.server_version,
            "transport": self.transport,
        }
