from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Starter plugin
    example_plugin_variable: str | None = Field(
        default=None, alias="EXAMPLE_PLUGIN_VARIABLE"
    )

    # Price source
    coingecko_base_url: str = Field(
        default="https://api.coingecko.com/api/v3", alias="COINGECKO_BASE_URL"
    )
    default_api_timeout_seconds: int = Field(
        default=20, alias="DEFAULT_API_TIMEOUT_SECONDS"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    # Character model providers
    anthropic_api_key: str = Field(default="", alias="ANTHROPIC_API_KEY")
    openrouter_api_key: str = Field(default="", alias="OPENROUTER_API_KEY")
    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    google_generative_ai_api_key: str = Field(
        default="", alias="GOOGLE_GENERATIVE_AI_API_KEY"
    )
    ollama_api_endpoint: str = Field(default="", alias="OLLAMA_API_ENDPOINT")

    # Character platforms
    discord_api_token: str = Field(default="", alias="DISCORD_API_TOKEN")
    twitter_api_key: str = Field(default="", alias="TWITTER_API_KEY")
    twitter_api_secret_key: str = Field(default="", alias="TWITTER_API_SECRET_KEY")
    twitter_access_token: str = Field(default="", alias="TWITTER_ACCESS_TOKEN")
    twitter_access_token_secret: str = Field(
        default="", alias="TWITTER_ACCESS_TOKEN_SECRET"
    )
    telegram_bot_token: str = Field(default="", alias="TELEGRAM_BOT_TOKEN")

    ignore_bootstrap: bool = Field(default=False, alias="IGNORE_BOOTSTRAP")


@lru_cache
def get_settings() -> Settings:
    return Settings()
