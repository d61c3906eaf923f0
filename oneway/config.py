"""Library settings loaded from environment variables."""
from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ONEWAY_* environment variables or a .env file"""
    # Voting
    MAX_DAILY_VOTES: int = Field(5, ge=1, description="Votes per user per contest per day")
    TIMEZONE: str = Field("UTC", description="Timezone whose midnight resets vote allowances")

    # Wallet
    STARTING_BALANCE: Decimal = Field(Decimal("250"), ge=0, description="Opening deposit for a new wallet")
    MIN_PAYOUT: Decimal = Field(Decimal("10"), gt=0, description="Smallest instant payout accepted")
    DEMO_PRICE: Decimal = Field(Decimal("100"), gt=0, description="Price of a demo session")
    TOUR_PRICE: Decimal = Field(Decimal("100"), gt=0, description="Price of a live tour")

    LOG_LEVEL: str = Field("INFO", description="Log level used by the scripts")

    model_config = SettingsConfigDict(
        env_prefix='ONEWAY_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True
    )


settings = Settings()
