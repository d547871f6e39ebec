"""
Settings for the daypicker HTTP adapter, read from the environment (.env supported).
"""
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TZ = os.getenv("DAYPICKER_TZ", "UTC")
FIRST_WEEKDAY = os.getenv("DAYPICKER_FIRST_WEEKDAY", "mon")
LOG_LEVEL = os.getenv("DAYPICKER_LOG_LEVEL", "INFO").upper()
