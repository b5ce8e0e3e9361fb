"""
Core processing modules for the subscription spending analyzer.

This package contains:
- aggregate: Report building from extracted transactions
- classify: Keyword-based service and category detection
- config: Application configuration and settings
- exceptions: Custom exception classes
- keywords: Ordered service and category keyword tables
- logger: Logging configuration
- normalize: Amount and text normalization
- parsing: CSV parsing and column inference
- pdf_text: PDF text extraction
- schema: Pydantic models for transactions and reports
- statement_lines: Transaction extraction from PDF statement text
- validation: Upload validation
"""
