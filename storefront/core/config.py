import os
from decimal import Decimal
from typing import List
from dotenv import load_dotenv

# grab env vars from .env file
load_dotenv()


class Settings:
    # app settings
    APP_ENV: str = os.getenv("APP_ENV", "dev")
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS stuff
    _origins_raw: str = os.getenv("ALLOWED_ORIGINS", "*")
    ALLOWED_ORIGINS: List[str] = [o.strip() for o in _origins_raw.split(",") if o.strip()] if _origins_raw else ["*"]

    # delivery fee defaults, admins can change these at runtime
    DELIVERY_FEE_TYPE: str = os.getenv("DELIVERY_FEE_TYPE", "flat")
    DELIVERY_FLAT_FEE: Decimal = Decimal(os.getenv("DELIVERY_FLAT_FEE", "10.00"))
    DELIVERY_PER_MILE_FEE: Decimal = Decimal(os.getenv("DELIVERY_PER_MILE_FEE", "1.50"))
    DELIVERY_PER_ITEM_FEE: Decimal = Decimal(os.getenv("DELIVERY_PER_ITEM_FEE", "0.50"))
    FREE_DELIVERY_THRESHOLD: Decimal = Decimal(os.getenv("FREE_DELIVERY_THRESHOLD", "99.00"))

    # checkout tax (Texas combined rate)
    SALES_TAX_RATE: Decimal = Decimal(os.getenv("SALES_TAX_RATE", "0.0825"))

    # delivery zone around the store
    DELIVERY_RADIUS_MILES: float = float(os.getenv("DELIVERY_RADIUS_MILES", "3"))
    STORE_LAT: float = float(os.getenv("STORE_LAT", "33.1507"))
    STORE_LNG: float = float(os.getenv("STORE_LNG", "-96.8236"))


settings = Settings()
