# SHAVault Test Suite
"""
Test suite including:
- Unit tests (each SHA-256 stage)
- Integration tests (reference cross-checks, CLI)
- Security tests (invalid inputs, avalanche, constant tables)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
