"""
API Documentation Catalog backend.
"""
