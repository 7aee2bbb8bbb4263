"""Error taxonomy for a pipeline run.

All three errors are terminal for the run that raised them: nothing is
retried and no partial output is produced.
"""

from __future__ import annotations


class SalesPipelineError(Exception):
    """Base class for every error a pipeline run can report."""


class IngestionError(SalesPipelineError):
    """The source could not be fetched or read (missing, unreadable, HTTP failure)."""


class ParseError(SalesPipelineError):
    """The delimited text is empty or malformed, or required fields are missing."""


class EmptyDatasetError(SalesPipelineError):
    """No sale records remain, so whole-dataset averages are undefined."""


class AggregationError(SalesPipelineError):
    """A derived total or growth rate is not a finite number (e.g. float overflow)."""
