"""
Dependency Injection Container.

Centralized container for creating and managing application dependencies.
Wires concrete in-memory adapters to the application ports.
"""

import logging

from storefront.config.settings import Settings

from .base import BaseContainer
from .ecommerce import EcommerceContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(self, settings: Settings | None = None, setup_logging: bool = False):
        """
        Initialize container with all domain sub-containers.

        Args:
            settings: Optional settings (defaults to environment settings)
            setup_logging: Configure root logging from the settings
        """
        self._base = BaseContainer(settings, setup_logging=setup_logging)
        self.ecommerce = EcommerceContainer(self._base)

    @property
    def settings(self) -> Settings:
        return self._base.settings

    def get_config(self) -> dict:
        """Get current configuration."""
        return self._base.get_config()


_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """Get the process-wide container, configuring logging on first use."""
    global _container
    if _container is None:
        _container = DependencyContainer(setup_logging=True)
        logger.info("DependencyContainer created")
    return _container


__all__ = [
    "BaseContainer",
    "DependencyContainer",
    "EcommerceContainer",
    "get_container",
]
