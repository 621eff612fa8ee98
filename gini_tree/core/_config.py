from typing import Annotated

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Class to store all the settings of the library."""

    MAX_DEPTH: PositiveInt = 3
    EMPTY_LABEL: Annotated[int, Field(ge=0, le=1)] = 1

    model_config = SettingsConfigDict(
        env_prefix="GINI_TREE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise the settings sources order.

        Order: initialization, environment variables, dotenv, then file secrets.
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


settings = Settings()  # type: ignore
