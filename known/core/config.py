from pydantic_settings import BaseSettings

from known.client.folders import DEFAULT_API_HOST


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 30

    session_cookie_name: str = "known_session"

    # Public origin of the JSON API, used by the folder client
    api_host: str = DEFAULT_API_HOST

    posts_dir: str = "posts"
    create_tables: bool = True
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
