"""
Products module - Product catalog management.

This module handles:
- Product entity and domain logic
- Product repository (port)
- Product infrastructure (Django ORM model, persistence context, adapters)
- Product application service
"""
