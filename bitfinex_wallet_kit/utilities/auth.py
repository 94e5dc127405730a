"""
Client wiring: configuration -> request factory -> executor -> wallet service.
"""

from ..config.environment import WalletKitConfig, load_config
from ..core.executor import create_executor
from ..core.request_builder import create_request_factory
from ..services.wallet_service import WalletService
from .constants import RequestConstructionError


def create_wallet_service(
    config: WalletKitConfig | None = None, require_credentials: bool = True
) -> WalletService:
    """
    Create a WalletService backed by the signing factory and requests executor.

    Args:
        config: Configuration to use; loaded from the environment when None
        require_credentials: Fail immediately if credentials are missing

    Raises:
        RequestConstructionError: If credentials are required but missing
    """
    config = config or load_config()
    if require_credentials and not config.has_credentials:
        raise RequestConstructionError(
            "Missing required API credentials: set BFX_API_KEY and BFX_API_SECRET "
            "in the environment or in a .env file"
        )

    factory = create_request_factory(config.api_key, config.api_secret, rest_host=config.rest_host)
    return WalletService(factory, create_executor(timeout=config.timeout))
