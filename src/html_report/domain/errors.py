from __future__ import annotations


class HtmlReportError(Exception):
    """Base class for every failure raised by html_report."""


class AlreadyExistsError(HtmlReportError, FileExistsError):
    """The report root already exists; reports are always written to a fresh folder."""


class RaggedTableError(HtmlReportError, ValueError):
    """A matrix is empty or its rows do not all have the same length."""


class ShapeMismatchError(HtmlReportError, ValueError):
    """An overlay matrix does not have the shape of the table it decorates."""


class DuplicateAssetError(HtmlReportError, FileExistsError):
    """The sanitized asset name is already taken in the data folder."""


class SourceNotFoundError(HtmlReportError, FileNotFoundError):
    """The file to link does not exist."""


class InvalidAssetNameError(HtmlReportError, ValueError):
    """Sanitizing the requested name left nothing usable."""
