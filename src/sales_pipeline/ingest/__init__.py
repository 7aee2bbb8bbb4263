"""Ingestion: read the sales export and turn it into validated records.

Reading (local path or http(s) URL), CSV parsing and the malformed-row
policy live here; column normalization and per-row validation are in
`sales_pipeline.clean`.
"""
