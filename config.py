from typing import List, Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "6543"
    POSTGRES_DB: str = "postgres"
    DATABASE_URL: Optional[str] = None

    ANTHROPIC_API_KEY: Optional[str] = None
    ASSISTANT_MODEL: str = "claude-3-5-sonnet-latest"
    ASSISTANT_MAX_TOKENS: int = 1024
    ASSISTANT_MAX_TOOL_ROUNDS: int = 5

    # roll the stock update back when the linked transaction cannot be written
    STRICT_MOVEMENT_TRANSACTIONS: bool = False
    CURRENCY: str = "EUR"

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

settings = Settings()
