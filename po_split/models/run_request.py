from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..errors import RequiredValueMissing

"""Caller contract shared by front-ends.

A front-end (CLI today) resolves the user's input into a RunRequest and calls
validate() before handing it to the pipeline entry points.
"""

__all__ = [
    "RunMode",
    "RunRequest",
]


class RunMode(Enum):
    """Pipeline output selector.

    - SPLIT: write one normalized file per store key
    - REPORT: aggregate totals per store, no row-level output
    """
    SPLIT = "split"
    REPORT = "report"


@dataclass(frozen=True)
class RunRequest:
    """Paths as the user typed them; converted to Path only after validate().

    "." is a real location (the working directory), so blankness is judged on
    the raw text, never on a Path built from it.
    """
    input_path: str | None
    list_path: str | None
    output_path: str | None = None  # split mode only
    override_all: bool = False  # split mode only
    mode: RunMode = RunMode.SPLIT

    def validate(self) -> None:
        """Reject missing required paths, in input / output / list order.

        Raises:
            RequiredValueMissing: naming the first missing field
        """
        if _is_blank(self.input_path):
            raise RequiredValueMissing("input")
        if self.mode is RunMode.SPLIT and _is_blank(self.output_path):
            raise RequiredValueMissing("output")
        if _is_blank(self.list_path):
            raise RequiredValueMissing("list")

    @property
    def input_file(self) -> Path:
        return Path(self.input_path)

    @property
    def list_file(self) -> Path:
        return Path(self.list_path)

    @property
    def output_dir(self) -> Path:
        return Path(self.output_path)


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""
