"""
Shared utilities for the books API.
"""
