import os
import logging
from dotenv import load_dotenv

load_dotenv()

DEFAULT_THRESHOLD = int(os.getenv("DEFAULT_THRESHOLD", "70"))
MAX_FILES = int(os.getenv("MAX_FILES", "200"))
MAX_FILE_MB = float(os.getenv("MAX_FILE_MB", "10"))
MATCH_SIMILARITY_WEIGHT = float(os.getenv("MATCH_SIMILARITY_WEIGHT", "0.5"))
MATCH_KEYWORDS = int(os.getenv("MATCH_KEYWORDS", "20"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
