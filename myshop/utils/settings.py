# myshop/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = os.getenv("SERVICE_NAME", "product-catalog")
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SEED_PRODUCTS = os.getenv("SEED_PRODUCTS", "true").lower() in ("1", "true", "yes")
