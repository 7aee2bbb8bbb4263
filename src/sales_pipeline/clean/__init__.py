"""Cleaning utilities for the pipeline.

Provides functions to normalize the required sales columns, standardize
dates and amounts, and validate rows into `SaleRecord` models.
"""
