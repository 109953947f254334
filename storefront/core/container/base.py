"""
Base Container - Shared Settings.

Single Responsibility: Load settings and configure logging once.
"""

import logging

from storefront.config.settings import Settings, get_settings
from storefront.core.shared.logger import configure_logging

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared resources.

    Single Responsibility: Hold settings used by domain containers.
    """

    def __init__(self, settings: Settings | None = None, setup_logging: bool = False):
        """
        Initialize base container.

        Args:
            settings: Settings to use instead of the cached environment settings
            setup_logging: Configure root logging from the settings
        """
        self.settings = settings or get_settings()

        if setup_logging:
            configure_logging(
                level=self.settings.LOG_LEVEL,
                format_type=self.settings.LOG_FORMAT,
                log_file=self.settings.LOG_FILE,
            )

        logger.info(f"BaseContainer initialized ({self.settings.ENVIRONMENT})")

    def get_config(self) -> dict:
        """Get current configuration."""
        return {
            "environment": self.settings.ENVIRONMENT,
            "low_stock_threshold": self.settings.LOW_STOCK_THRESHOLD,
            "order_number_max_attempts": self.settings.ORDER_NUMBER_MAX_ATTEMPTS,
            "domains": ["ecommerce"],
        }
