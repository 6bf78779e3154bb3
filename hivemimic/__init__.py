"""Simulated Hive blockchain node serving JSON-RPC for end-to-end testing."""

__version__ = "1.0.0"