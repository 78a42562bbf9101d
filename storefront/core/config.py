from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    BASE_FEE: int = 150          # KES flat base
    RATE_PER_KM: float = 2.0     # KES per km of road distance from Nairobi
    MIN_FEE: int = 200           # KES floor (covers Nairobi deliveries)
    DEFAULT_DISTANCE_KM: int = 500  # unknown city -> generic upcountry distance

    ORIGIN_ADDRESS: str = "Imaara Mall, Nairobi, Kenya"

    GOOGLE_MAPS_API_KEY: Optional[str] = None
    DISTANCE_MATRIX_URL: str = "https://maps.googleapis.com/maps/api/distancematrix/json"
    DISTANCE_MATRIX_TIMEOUT: int = 10
    REFRESH_DELAY_MS: int = 200

    REDIS_URL: Optional[str] = None

    RATE_LIMIT: int = 100
    RATE_LIMIT_WINDOW: int = 600  # 10 minutes

    API_TITLE: str = "Storefront Shipping Service"
    API_DESCRIPTION: str = "Delivery fee quotes and checkout totals for the jewellery storefront"
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
