"""Package configuration and settings."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Ambient settings loaded from environment variables.

    Only logging reads these; codec behaviour never depends on them.
    """

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("POLYCODEC_LOG_LEVEL", "INFO").upper()
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"


settings = Settings()
