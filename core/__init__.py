"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- Request observability middleware
- Health check views
"""
