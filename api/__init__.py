"""
REST API for the product catalog.
"""
