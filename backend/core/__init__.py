"""
Core module containing foundational components for the Unit Master service.

This module provides:
- Exception taxonomy and raise-helpers
- Request logging and exception handling middleware
"""
