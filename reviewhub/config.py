from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    google_places_api_key: str = ""
    google_place_ids: dict[str, str] = {}
    google_fallback_place_id: str = "ChIJB9OTMDIbdkgRp0JWbQGZsS8"
    hostaway_client_id: str = ""
    hostaway_client_secret: str = ""
    hostaway_base_url: str = "https://api.hostaway.com/v1"
    default_page_size: int = 10
    max_page_size: int = 50
    log_level: str = "INFO"
