"""
Load Platform Wallet use case.

Builds the wallet the platform signs orders and trades with.
"""

from notaire.config.settings import Settings
from notaire.domain.entities.wallet import Wallet
from notaire.domain.exceptions import ConfigurationError
from notaire.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class LoadPlatformWallet:
    """
    Load the platform signing wallet from settings.

    Business rules:
    - PLATFORM_PRIVATE_KEY is used when configured
    - Without a key, production refuses to start
    - Without a key, other environments get an ephemeral random wallet
    """

    def __init__(self, settings: Settings):
        """
        Initialize use case with settings.

        Args:
            settings: Application settings
        """
        self.settings = settings

    def execute(self) -> Wallet:
        """
        Execute wallet loading.

        Returns:
            Platform Wallet with configured admin/operator flags

        Raises:
            ConfigurationError: If no key is configured in production
            InvalidKeyFormat: If the configured key is malformed
            KeyGenerationFailed: If an ephemeral key cannot be generated
        """
        flags = {
            "admin": self.settings.PLATFORM_ADMIN,
            "operator": self.settings.PLATFORM_OPERATOR,
        }

        secret = self.settings.PLATFORM_PRIVATE_KEY
        if secret is not None and secret.get_secret_value():
            wallet = Wallet.from_private_key(secret.get_secret_value(), **flags)
            logger.info(
                "Platform wallet loaded",
                extra={"wallet_address": wallet.get_address()},
            )
            return wallet

        if self.settings.is_production:
            raise ConfigurationError(
                "PLATFORM_PRIVATE_KEY", "required in production"
            )

        wallet = Wallet.new(**flags)
        logger.warning(
            f"No PLATFORM_PRIVATE_KEY set, using ephemeral wallet "
            f"(ENV={self.settings.ENV})",
            extra={"wallet_address": wallet.get_address()},
        )
        return wallet
