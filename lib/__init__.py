# =============================================================================
# lib/ - Standalone Integration Modules
# =============================================================================
# This package contains the adapters to external systems:
# - storage/: Intention store interface with memory and SQLAlchemy backends
# - telegram_client.py: Best-effort Telegram notification relay
# - utils.py: Shared utilities (ids, UTC clock, base error)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.storage import (
    DatabaseIntentionStore,
    IntentionStore,
    MemoryIntentionStore,
    StoreConstraintError,
    StoreError,
    StoreUnavailableError,
    build_store,
)
from lib.telegram_client import (
    ConfigurationMissingError,
    DeliveryFailedError,
    NotificationError,
    NotificationResult,
    TelegramNotifier,
)
from lib.utils import ApplicationError, generate_id, utc_now

__all__ = [
    # Storage
    "IntentionStore",
    "MemoryIntentionStore",
    "DatabaseIntentionStore",
    "StoreError",
    "StoreUnavailableError",
    "StoreConstraintError",
    "build_store",
    # Telegram
    "TelegramNotifier",
    "NotificationResult",
    "NotificationError",
    "ConfigurationMissingError",
    "DeliveryFailedError",
    # Utils
    "ApplicationError",
    "generate_id",
    "utc_now",
]
