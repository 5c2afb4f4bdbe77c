# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Holds vote endpoints, session cookie, wiki endpoint and local paths as typed settings

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ISAAC_VOTE_TOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Vote API Configuration
    vote_url: str = Field(
        default="https://vote.qiuy.cloud/api/v1/vote/send", description="Current vote endpoint"
    )
    vote_referer: str = Field(default="https://vote.qiuy.cloud/", description="Referer sent to the current endpoint")
    legacy_vote_url: str = Field(
        default="http://114.55.238.72:8080/api/vote/sendVoting", description="Legacy vote endpoint"
    )
    legacy_vote_referer: str = Field(
        default="http://114.55.238.72:8088/", description="Referer sent to the legacy endpoint"
    )
    session_user_id: str = Field(
        default="2a7b8050-b2a8-43a0-b5bd-d27805fbd160",
        description="Value of the user_id session cookie sent with current-endpoint votes",
    )

    # Vote parameters
    winner: int = Field(default=628, description="Item ID that wins every vote")
    filter_num: int = Field(default=705, description="Opaque filter number required by the vote API")
    loser_start: int = Field(default=530, description="First loser ID of the vote range (inclusive)")
    loser_end: int = Field(default=535, description="Last loser ID of the vote range (inclusive)")
    single_vote_loser: int = Field(default=2, description="Loser ID used by the single manual vote")

    # Wiki Configuration
    wiki_api_url: str = Field(default="https://isaac.huijiwiki.com/api.php", description="Isaac wiki api.php URL")
    wiki_referer: str = Field(
        default="https://isaac.huijiwiki.com/wiki/%E9%81%93%E5%85%B7", description="Referer sent to the wiki API"
    )

    # Item catalogue
    items_dir: Path = Field(default=Path("assets/items"), description="Directory of item sprite files")
    output_path: Path = Field(default=Path("items.json"), description="Where the item catalogue JSON is written")
    item_key_prefix: str = Field(default="c", description="Prefix turning a collectible ID into a wiki lookup key")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
