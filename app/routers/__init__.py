# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health and readiness checks
# - intentions.py: Prayer intention listing and submission
# - chat.py: Parish assistant chat
#
# Each router is mounted in main.py under the /api prefix.
# =============================================================================

from . import health
from . import intentions
from . import chat

__all__ = [
    "health",
    "intentions",
    "chat",
]
