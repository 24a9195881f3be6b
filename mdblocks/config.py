import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from mdblocks.options import ListOptions, ParsingOptions


class Settings(BaseSettings):
    log_level: str = "WARNING"

    # Task list items: text prepended in place of the [x] / [ ] marker
    checkbox_checked_prefix: str = ""
    checkbox_unchecked_prefix: str = ""

    model_config = SettingsConfigDict(
        env_prefix="MDBLOCKS_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
    )

    def parsing_options(self) -> ParsingOptions:
        return ParsingOptions(
            lists=ListOptions(
                checked_prefix=self.checkbox_checked_prefix,
                unchecked_prefix=self.checkbox_unchecked_prefix,
            )
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
