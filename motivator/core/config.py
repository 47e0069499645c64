"""
Application configuration loader and it handles:
- Environment variables (and a local .env file)
- Upstream completion API settings
- Server settings

And, the main purpose:
Central place for system configuration. The relay receives a Settings
instance at construction instead of reading the environment itself.
"""


from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # LLM
    API_KEY: str = ""
    COMPLETIONS_URL: str = "https://api.fireworks.ai/inference/v1/chat/completions"
    LLM_MODEL: str = "accounts/sentientfoundation-serverless/models/dobby-mini-unhinged-plus-llama-3-1-8b"
    TEMPERATURE: float = 0.7
    MAX_TOKENS: int = 200  # 0 = let the provider decide
    REQUEST_TIMEOUT_SEC: float = 30.0

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    STATIC_DIR: Path = PACKAGE_DIR / "static"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"
        frozen = True

    @property
    def has_api_key(self) -> bool:
        return bool(self.API_KEY)


settings = Settings()
