"""
Test suite for the Bootcamp Directory API.

This package contains:
- Unit tests (models and services)
- API endpoint tests
- Integration tests
- Property-based tests
- Security tests
"""
