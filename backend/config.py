"""Configuration management for the Resume Q&A Viewer."""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Chat endpoint
CHAT_API_URL = os.getenv("CHAT_API_URL", "https://api.yuchenhsu.com/api/chat")

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:5173"
).split(",")

# Document Configuration
DEFAULT_PDF_PATH = os.getenv(
    "DEFAULT_PDF_PATH",
    os.path.join(os.path.dirname(__file__), "assets", "resume.pdf")
)
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "zh")

# Zoom Configuration
DEFAULT_SCALE = float(os.getenv("DEFAULT_SCALE", "0.9"))
MIN_SCALE = 0.5
MAX_SCALE = 2.0
SCALE_STEP = 0.1

# Profile shown next to the title
PROFILE_NAME = os.getenv("PROFILE_NAME", "")
PROFILE_EMAIL = os.getenv("PROFILE_EMAIL", "")
PROFILE_PHONE = os.getenv("PROFILE_PHONE", "")
MODEL_LABEL = os.getenv("MODEL_LABEL", "GPT-3.5-turbo")

# Logging Configuration
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
