import os

# Loads the .env file for the active ENV before anything below reads it
import blog_mastermind.core.env  # noqa: F401

# OpenRouter (OpenAI-compatible) settings
# Default key used when no key has been saved through /config/api-key
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
OPENROUTER_BASE_URL = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "openai/gpt-4o-mini")
OPENROUTER_SITE_URL = os.getenv("OPENROUTER_SITE_URL", "")
OPENROUTER_APP_NAME = os.getenv("OPENROUTER_APP_NAME", "Semantic Blog Mastermind")

# Serper web search
SERPER_API_KEY = os.getenv("SERPER_API_KEY")
SEARCH_RESULT_COUNT = int(os.getenv("SEARCH_RESULT_COUNT", "10"))

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Boundary checks for user-supplied OpenRouter keys
API_KEY_PREFIX = "sk-or-"
API_KEY_MIN_LENGTH = 20
