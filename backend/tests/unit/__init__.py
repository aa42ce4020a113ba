"""
Unit Tests

Unit tests run in isolation without external dependencies.
Redis is mocked; records come from in-memory stores.
"""
