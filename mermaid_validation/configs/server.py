"""
HTTP server configuration settings.

Dependencies: pydantic_settings
System role: uvicorn bind address and CORS configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from mermaid_validation.configs.base import env_config


class ServerSettings(BaseSettings):
    """Server bind and CORS settings."""

    model_config = env_config("SERVER_")

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8080, description="Port to listen on")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed by the CORS middleware",
    )
