"""Test fixtures for VTS.

This package provides reusable test fixtures:
- shell: Factories for session state, filesystems and interpreters
- api: TestClient and SessionRegistry fixtures for API tests
"""
