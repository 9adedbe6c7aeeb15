"""Exception types raised across the takeaway package."""

from __future__ import annotations


class TakeawayError(Exception):
    """Base class for every error the entry point reports."""


class OrderFileError(TakeawayError):
    """An order payload could not be turned into an Order."""


class OrderFormatError(OrderFileError):
    """The file extension does not map to a known order format."""


class OrderDecodeError(OrderFileError):
    """The payload is not valid for its declared format."""


class OrderEncodeError(OrderFileError):
    """An order could not be serialized."""


class ChooserAborted(TakeawayError):
    """The user cancelled an interactive prompt."""


class WorkflowError(TakeawayError):
    """A workflow stage failed; the message names the stage."""
