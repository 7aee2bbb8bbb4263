"""sales_pipeline package.

Contains modules for reading a delimited sales export, cleaning & validating
sale records, building the yearly / sub-category / trend aggregations, and
utilities for serving a Streamlit dashboard.

Architecture:
- Ingest → Clean → Aggregate, computed once per run on an immutable snapshot
- pandas is used for parsing and grouped sums
- Pydantic models validate records and every derived view
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
