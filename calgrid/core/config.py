from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calgrid.enums import SupportedLocale, Weekday


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    FIRST_DAY_OF_WEEK: int = Field(default=Weekday.SUNDAY, ge=0, le=6)
    LOCALE: SupportedLocale = SupportedLocale.EN


settings = Settings()
