"""
Teamup API Configuration

Connection and identity settings for one Teamup room: the API key, the
optional calendar password, the Teamup calendar (account) id and the name of
the sub-calendar that represents the room.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.teamup.com"


class TeamupSettings(BaseSettings):
    """Environment-backed settings, read from TEAMUP_* variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="TEAMUP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    API_KEY: str = ""
    PASSWORD: Optional[str] = None
    # Teamup calls this the calendar key; it identifies the account, not a room
    CALENDAR_ID: str = ""
    ROOM_ID: str = ""
    BASE_URL: str = DEFAULT_BASE_URL
    TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"


@dataclass(frozen=True)
class TeamupConfig:
    """Configuration settings for a Teamup room calendar"""

    api_key: str
    calendar_id: str
    room_id: str
    password: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    @property
    def headers(self) -> Dict[str, str]:
        """Get authentication headers for Teamup API requests"""
        headers = {"Teamup-Token": self.api_key}
        if self.password:
            headers["Teamup-Password"] = self.password
        return headers

    def url(self, resource: str) -> str:
        """Build the URL of a resource under the configured calendar"""
        return f"{self.base_url.rstrip('/')}/{self.calendar_id}/{resource}"

    @classmethod
    def from_settings(cls, settings: TeamupSettings) -> "TeamupConfig":
        """Create configuration from loaded settings"""
        config = cls(
            api_key=settings.API_KEY,
            calendar_id=settings.CALENDAR_ID,
            room_id=settings.ROOM_ID,
            password=settings.PASSWORD or None,
            base_url=settings.BASE_URL,
            timeout=settings.TIMEOUT,
        )
        config.validate()
        return config

    @classmethod
    def from_env(cls) -> "TeamupConfig":
        """Create configuration from environment variables"""
        return cls.from_settings(TeamupSettings())

    def validate(self) -> bool:
        """Validate that required configuration is present"""
        if not self.api_key:
            raise ValueError("Teamup API key is required (TEAMUP_API_KEY)")
        if not self.calendar_id:
            raise ValueError("Teamup calendar id is required (TEAMUP_CALENDAR_ID)")
        if not self.room_id:
            raise ValueError("Room id is required (TEAMUP_ROOM_ID)")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        return True
