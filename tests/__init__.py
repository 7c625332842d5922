"""
Test suite for the EquityMD backend.

Running Tests:
- All tests: pytest
- Non-admin: pytest -m "not admin"
- Admin only: pytest -m admin
- Deal pages: pytest tests/test_deals_api.py tests/test_deal_resolver.py
"""
