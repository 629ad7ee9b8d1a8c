from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    genderize_base_url: str = "https://api.genderize.io/"
    genderize_api_key: str = ""
    genderize_timeout: float = 30.0
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
