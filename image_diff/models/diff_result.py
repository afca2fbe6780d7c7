from __future__ import annotations
from dataclasses import dataclass

from .image import Image


@dataclass
class DiffResult:
    """
    Output of the diff primitive.
    `changed` is the explicit "something differs" signal; `artifact` is the
    rendered diff, produced whether or not anything changed.
    """
    artifact: Image
    changed: bool
    rows_added: int = 0
    rows_removed: int = 0
