"""Aggregation builders.

This package turns a flat collection of `SaleRecord` into the views the
dashboard renders: yearly summaries with growth, ranked sub-category
summaries, the sparse year × sub-category trend table, and whole-dataset
KPIs. Every builder is a pure function of its input.
"""
