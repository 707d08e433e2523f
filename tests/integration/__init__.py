"""Integration tests for pylifxcloud library.

These tests use a real access token from the .env file and make actual API calls.
They are marked with @pytest.mark.integration and skipped by default.

To run integration tests:
    pytest tests/integration -v -m integration

Environment variables required in .env:
    LIFX_TOKEN: Personal access token
    LIFX_API_BASE_URL: API base URL (optional, defaults to production)
    LIFX_TEST_SELECTOR: Selector of a light safe to change (optional, defaults to "all")
"""
