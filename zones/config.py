"""Environment-based configuration using pydantic-settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Zone editor configuration loaded from ``ZONES_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="ZONES_")

    min_zones_count: int = 3
    max_zones_count: int = 50
    store_path: str = ".zones.json"
    defaults_path: str = "defaults/zones.yaml"
    terminal_channel_errors: bool = False
    log_level: str = "WARNING"
    log_json: bool = False

    @model_validator(mode="after")
    def check_count_bounds(self) -> "Config":
        """Reject zone count bounds that cannot hold a partition.

        Returns:
            The validated Config instance.
        """
        if self.min_zones_count < 1:
            raise ValueError("min_zones_count must be at least 1")
        if self.max_zones_count < self.min_zones_count:
            raise ValueError("max_zones_count must not be lower than min_zones_count")
        return self
