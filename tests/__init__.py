"""
Tests Package

Unit tests for the Axion API client. Network access is never used:
the request pipeline is exercised through a scripted transport
(see conftest.py) and mocked aiohttp sessions.
"""

__all__ = []
