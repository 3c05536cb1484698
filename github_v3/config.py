"""Configuration settings for the GitHub v3 API client."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration settings for GitHub API client."""

    api_base_url: str = Field(
        default="https://api.github.com",
        description="Base URL for GitHub API",
    )

    token: str = Field(
        default="",
        description="Personal or OAuth access token sent as access_token",
    )

    login: str = Field(
        default="",
        description="Login of the authenticated user, used as the default owner",
    )

    accept: str = Field(
        default="application/vnd.github.v3+json",
        description="Media type requested from the API",
    )

    user_agent: str = Field(
        default="github-v3-client/1.0",
        description="User agent string for API requests",
    )

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    archive_dir: str = Field(
        default="./github/zip",
        description="Directory where zipball/tarball downloads are written",
    )

    default_calls_limit: int = Field(
        default=5000,
        ge=0,
        description="Rate-limit counters before the first response is seen",
    )

    default_key_title: str = Field(
        default="github-v3-client",
        description="Title given to public keys added without one",
    )

    class Config:
        env_prefix = "GITHUB_"
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()
