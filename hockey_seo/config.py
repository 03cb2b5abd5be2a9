"""
Runtime settings for the Hockey SEO Opportunity Analyzer.
Values come from the environment (optionally a .env file) and default to the
tuning the service has always shipped with.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Analysis limits
MAX_KEYWORDS = int(os.getenv("MAX_KEYWORDS", 5))
HIGH_OPPORTUNITY_THRESHOLD = int(os.getenv("HIGH_OPPORTUNITY_THRESHOLD", 7))

# Simulated ranking
RANK_NOT_FOUND_PROBABILITY = float(os.getenv("RANK_NOT_FOUND_PROBABILITY", 0.4))
RANK_MIN = int(os.getenv("RANK_MIN", 1))
RANK_MAX = int(os.getenv("RANK_MAX", 10))

# Server
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

API_VERSION = "1.0.0"
