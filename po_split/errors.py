from __future__ import annotations

"""Error taxonomy for the split / report pipeline.

Every pipeline failure is fatal for the current run: nothing is retried and no
partial result is returned. Front-ends render these as opaque messages.
"""

__all__ = [
    "PipelineError",
    "ResourceUnavailable",
    "MalformedRecord",
    "InvalidQuantity",
    "RequiredValueMissing",
]


class PipelineError(Exception):
    """Base exception for pipeline failures."""


class ResourceUnavailable(PipelineError):
    """Raised when an input file cannot be read or an output file cannot be created."""


class MalformedRecord(PipelineError):
    """Raised when a row cannot be decoded into the fixed 9-field shape."""


class InvalidQuantity(PipelineError):
    """Raised when a quantity field is not a non-negative integer."""


class RequiredValueMissing(Exception):
    """Raised by the caller layer when a required path was not supplied.

    Not a PipelineError: it is detected before the pipeline runs.
    """

    MESSAGES = {
        "input": "The input field can not be empty.",
        "output": "The output field can not be empty.",
        "list": "The list field can not be empty.",
    }

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(self.MESSAGES.get(field, f"The {field} field can not be empty."))
