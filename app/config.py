from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./fleet.sqlite3"
    api_key: str = ""  # empty = no auth check (local dev)
    plate_lookup_url: str = "https://api-immat.vercel.app/getDataImmatriculation"
    plate_lookup_timeout: float = 10.0
    plate_lookup_debounce: float = 1.0  # seconds of quiet after the last keystroke
    client_timeout: float = 5.0
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
