"""API route handlers.

- checks: local HTTP surface that forwards JSON events to the check handlers
"""
