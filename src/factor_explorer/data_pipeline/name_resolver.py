"""
Name Resolver - short factor codes to display names and back.
"""

from __future__ import annotations

import logging
import unicodedata

import pandas as pd

from factor_explorer.data_pipeline.schemas import validate_names_frame
from factor_explorer.data_pipeline.types import NameEntry

logger = logging.getLogger(__name__)


def collation_key(text: str) -> tuple[str, str]:
    """Sort key approximating a locale-aware comparison.

    Accents are stripped and case is folded for the primary key; the raw text
    breaks ties so the order is total and deterministic.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


class NameResolver:
    """Bidirectional mapping between factor ids and display names."""

    def __init__(self, entries: list[NameEntry]) -> None:
        self._by_id: dict[str, str] = {}
        self._by_name: dict[str, str] = {}
        for entry in entries:
            self._by_id[entry.factor_id] = entry.display_name
            self._by_name[entry.display_name] = entry.factor_id

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "NameResolver":
        """Build the resolver from the ``abr_jkp`` / ``name_new`` mapping rows."""
        validated = validate_names_frame(frame)
        entries = [
            NameEntry(factor_id=abr, display_name=name)
            for abr, name in zip(validated["abr_jkp"], validated["name_new"])
        ]
        logger.info("Loaded %d factor names", len(entries))
        return cls(entries)

    def display_name(self, factor_id: str) -> str:
        return self._by_id.get(factor_id, factor_id)

    def factor_id(self, display_name: str) -> str | None:
        return self._by_name.get(display_name)

    def entries_sorted_by_display_name(self) -> list[NameEntry]:
        """All entries ordered by display name, independent of load order."""
        entries = [NameEntry(factor_id=k, display_name=v) for k, v in self._by_id.items()]
        return sorted(entries, key=lambda e: (collation_key(e.display_name), e.factor_id))

    def __contains__(self, factor_id: object) -> bool:
        return factor_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)
