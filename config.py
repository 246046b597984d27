import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    API_KEY = os.getenv("SPAM_API_KEY")  # Optional; unset means open access
    PROFILE = os.getenv("SPAM_PROFILE", "enhanced")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))

    # Presentation-level limits (checked before the engine is called)
    UI_MIN_LENGTH = 2
    UI_MAX_LENGTH = 1000

    # Probability bands shown next to the confidence value
    HIGH_PROBABILITY_BAND = 0.65
    LOW_PROBABILITY_BAND = 0.35
