import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    data_file: str = "data/transacoes.json"
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    log_file: str = "logs/finance_dashboard.log"
    api_url_base: str = "http://localhost:4000"


def load_settings() -> Settings:
    """Build settings from the environment (and a .env file when present)."""
    load_dotenv()
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        data_file=os.getenv("DATA_FILE", "data/transacoes.json"),
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=int(os.getenv("API_PORT", 4000)),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE", "logs/finance_dashboard.log"),
        api_url_base=os.getenv("API_URL_BASE", "http://localhost:4000"),
    )
