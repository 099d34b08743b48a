"""Application configuration and environment settings"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Helius settings
    HELIUS_API_KEY: Optional[str] = Field(None, description="Helius API key")
    HELIUS_API_URL: str = Field("https://api.helius.xyz/v0", description="Helius API base URL")
    REQUEST_TIMEOUT: int = Field(30, description="HTTP timeout in seconds")

    # Request defaults
    DEFAULT_LIMIT: int = Field(100, description="Maximum number of transactions to fetch")

    # Export settings
    OUTPUT_DIR: str = Field("./output", description="Directory for output files")
    API_SOURCE: str = Field("Helius Enhanced API", description="Source label written to metadata")
    DATA_VERSION: str = Field("3.0", description="Export format version")

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )

settings = Settings()
