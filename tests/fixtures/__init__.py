"""Test fixtures for the directory tree simulator.

This package provides reusable test fixtures:
- filesystem: Directory and SystemState factories
- api: SystemState instances for API integration tests
"""
