"""Cross-cutting integration tests for the VTS API.

This package contains tests that verify behavior spanning multiple endpoints,
ensuring consistency in concurrent access to shared sessions.
"""
