"""Custom exceptions for Decision Trace."""


class DecisionTraceError(Exception):
    """Base exception for decision trace processing errors."""


class LedgerInputError(DecisionTraceError):
    """Raised when ledger normalization is given something that is not a ledger-like object."""

    def __init__(self, received: str):
        self.received = received
        super().__init__(f"Ledger input must be an object, got {received}")


class ReportStoreError(DecisionTraceError):
    """Base exception for report store lookups."""


class ReportNotFoundError(ReportStoreError):
    """Raised when no stored report matches an id or prefix."""

    def __init__(self, report_id: str):
        self.report_id = report_id
        super().__init__(
            f"Report '{report_id}' not found. Reports are cached briefly; "
            "re-run the analysis and request the report again."
        )


class ReportIdTooShortError(ReportStoreError):
    """Raised when a report id prefix is too short to resolve safely."""

    def __init__(self, report_id: str, min_prefix: int):
        self.report_id = report_id
        self.min_prefix = min_prefix
        super().__init__(f"Report id prefix must be at least {min_prefix} characters, got '{report_id}'")


class AmbiguousReportIdError(ReportStoreError):
    """Raised when a report id prefix matches more than one stored report."""

    def __init__(self, report_id: str, matches: list[str]):
        self.report_id = report_id
        self.matches = matches
        super().__init__(
            f"Report id prefix '{report_id}' is ambiguous ({len(matches)} matches). "
            "Provide a longer prefix or the full id."
        )
