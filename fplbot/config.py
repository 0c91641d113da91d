import os
import logging

from dotenv import load_dotenv


def load_env() -> None:
    """Load environment variables from a .env file if available."""
    load_dotenv()


# Load env early
load_env()

# Logging configuration
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, log_level, logging.INFO),
)
logger = logging.getLogger(__name__)

# Reduce noisy libraries
logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
logging.getLogger("aiohttp.client").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.WARNING)


class Config:
    """Application configuration read from the environment."""

    # Slack App Configuration
    SLACK_BOT_TOKEN: str = os.getenv("SLACK_BOT_TOKEN", "").strip()
    SLACK_SIGNING_SECRET: str = os.getenv("SLACK_SIGNING_SECRET", "").strip()
    SLACK_API_URL: str = os.getenv("SLACK_API_URL", "https://slack.com/api").strip()

    # FPL API Configuration
    FPL_API_URL: str = os.getenv("FPL_API_URL", "https://fantasy.premierleague.com/api").strip()
    FPL_LEAGUE_ID: int = int(os.getenv("FPL_LEAGUE_ID", "578497"))

    # Webhook server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    @classmethod
    def validate_config(cls) -> None:
        if not cls.SLACK_BOT_TOKEN:
            raise ValueError("SLACK_BOT_TOKEN environment variable is required")
        if not cls.SLACK_SIGNING_SECRET:
            raise ValueError("SLACK_SIGNING_SECRET environment variable is required")

    @classmethod
    def get_api_base_url(cls) -> str:
        logger.info(f"Using FPL API endpoint: {cls.FPL_API_URL}")
        return cls.FPL_API_URL.rstrip("/")


# Expose commonly used constants
config = Config()
BASE = Config.FPL_API_URL.rstrip("/")
SLACK_API_URL = Config.SLACK_API_URL.rstrip("/")
LEAGUE_ID = config.FPL_LEAGUE_ID
