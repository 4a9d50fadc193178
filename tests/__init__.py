# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Kariua Parish API:
# - test_models.py: Pydantic schema validation
# - test_storage.py: Store contract tests run against both backends
# - test_telegram_client.py: Notification relay with mocked HTTP
# - test_intention_service.py: Submission pipeline ordering and failure policy
# - test_chat_service.py: Chat relay with a mocked OpenAI client
# - test_config.py: Settings parsing and backend selection
# - test_api.py: HTTP endpoints through FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================
