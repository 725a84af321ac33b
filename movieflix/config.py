from pathlib import Path
from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_path: Path = Path(__file__).resolve().parent.parent / "movies.db"
    log_level: str = "INFO"
    jwt_secret_key: SecretStr
    jwt_algorithm: str = "HS256"
    default_page_size: int = 20
    max_page_size: int = 100

    model_config = {"env_prefix": "MOVIEFLIX_"}


settings = Settings()
