#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against in-memory SQLite and need no external services:

    # Run all tests
    python -m pytest tests/ -v

    # Only the pure scoring/state-machine tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v
"""
