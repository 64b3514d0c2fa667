from __future__ import annotations

"""Public surface for parash.core.

Stable import location for the data model and the run report:

    from parash.core import UrlParts, RunReport
"""

from parash.core.models import HttpGetRequest, UrlParts
from parash.core.report import CommandResult, RunReport

__all__ = [
    "HttpGetRequest",
    "UrlParts",
    "CommandResult",
    "RunReport",
]
