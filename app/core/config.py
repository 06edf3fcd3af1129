import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "ArtVerse Backend API"
    app_version: str = "1.0.0"
    app_description: str = "A FastAPI application for the ArtVerse NFT marketplace"

    node_env: str = os.getenv("NODE_ENV", "development")
    api_prefix: str = "/api"

    host: str = "0.0.0.0"
    port: int = 5000

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Store
    seed_sample_data: bool = True
    # New artworks are listed publicly unless explicitly created unapproved
    artwork_auto_approve: bool = True

    class Config:
        env_file = ".env"


settings = Settings()


def get_settings() -> Settings:
    return settings
