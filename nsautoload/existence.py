"""First-existing-file lookup over candidate paths."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable


class ExistenceChecker:
    """Picks the first candidate that is a regular file.

    The file predicate defaults to ``os.path.isfile``; pass another callable
    (e.g. ``file_set.__contains__``) to check against an in-memory listing.
    """

    def __init__(self, is_file: Callable[[str], bool] | None = None) -> None:
        self.is_file = is_file or os.path.isfile

    def first_existing(self, candidates: Iterable[str]) -> str | None:
        for candidate in candidates:
            if self.is_file(candidate):
                return candidate
        return None
