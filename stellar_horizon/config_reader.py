# stellar_horizon/config_reader.py
"""Settings read from the environment and an optional .env file."""

import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stellar_horizon.domain.endpoint import PUBLIC_HORIZON_URL

dotenv_path = os.path.join(os.getcwd(), '.env')


class HorizonSettings(BaseSettings):
    horizon_url: str = PUBLIC_HORIZON_URL
    stellar_testnet: bool = False
    horizon_timeout: float = Field(default=30.0, gt=0)  # seconds, whole request
    horizon_user_agent: str = "stellar-horizon-client"

    model_config = SettingsConfigDict(
        env_file=dotenv_path,
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False
    )


def load_settings(env_file: Optional[str] = None, **overrides) -> HorizonSettings:
    """Read settings; keyword overrides win over the environment."""
    if env_file is not None:
        return HorizonSettings(_env_file=env_file, **overrides)  # type: ignore[call-arg]
    return HorizonSettings(**overrides)
