"""
Service layer for business logic.

This package contains the service class that orchestrates the
statement pipeline: validation, extraction, classification and
aggregation.
"""
