from typing import List

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./todo.db"
    ENV: str = "local"  # Environment setting

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["http://localhost:3001"]
    LOG_LEVEL: str = "INFO"

    # Client
    API_BASE_URL: str = "http://localhost:3000"

    class Config:
        env_file = ".env"

settings = Settings()
