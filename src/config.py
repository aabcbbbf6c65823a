"""Configuration and settings for the Article Claim Source Finder."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
LOG_DIR = Path(os.getenv("LOG_DIR", PROJECT_ROOT / "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# API Keys
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
SERP_API_KEY = os.getenv("SERP_API_KEY")

# Model configs
CLAUDE_MODEL = os.getenv("CLAUDE_MODEL", "claude-sonnet-4-20250514")
CLAUDE_MAX_TOKENS = 2000

# Search provider
SERPAPI_SEARCH_URL = "https://serpapi.com/search.json"
SEARCH_LANGUAGE = "en"
SEARCH_COUNTRY = "us"

# Source retrieval defaults
DEFAULT_MAX_SOURCES = 5
DEFAULT_RETRY_COUNT = 1
DEFAULT_TIMEOUT_MS = 8000

# Articles shorter than this are rejected before any LLM call
MIN_ARTICLE_LENGTH = 50
