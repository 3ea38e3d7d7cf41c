"""Custom exceptions for uutik_report."""


class ReportError(Exception):
    """Base exception for uutik_report operations."""


class ConversionError(ReportError):
    """Error during markdown to HTML conversion."""


class RenderError(ReportError):
    """Error while printing the PDF document."""
