"""Unit tests for NameResolver."""

from __future__ import annotations

import pandas as pd
import pytest

from factor_explorer.data_pipeline.errors import SchemaValidationError
from factor_explorer.data_pipeline.name_resolver import NameResolver, collation_key


class TestNameResolver:
    def test_display_name_lookup(self, names) -> None:
        assert names.display_name("x") == "Value"
        assert names.factor_id("Momentum") == "y"

    def test_unknown_id_falls_back_to_id(self, names) -> None:
        assert names.display_name("ret_60_12") == "ret_60_12"
        assert names.factor_id("Nothing") is None

    def test_sorted_by_display_name_ignoring_accents(self, names) -> None:
        ordered = [e.display_name for e in names.entries_sorted_by_display_name()]
        assert ordered == ["Émerging Quality", "Momentum", "Value"]

    def test_order_does_not_depend_on_load_order(self, names_frame) -> None:
        forward = NameResolver.from_frame(names_frame).entries_sorted_by_display_name()
        backward = NameResolver.from_frame(names_frame.iloc[::-1]).entries_sorted_by_display_name()
        assert forward == backward

    def test_case_insensitive_order(self) -> None:
        frame = pd.DataFrame({"abr_jkp": ["b", "a"], "name_new": ["beta", "Alpha"]})
        ordered = [e.factor_id for e in NameResolver.from_frame(frame).entries_sorted_by_display_name()]
        assert ordered == ["a", "b"]

    def test_blank_ids_are_dropped(self) -> None:
        frame = pd.DataFrame({"abr_jkp": ["a", " ", None], "name_new": ["A", "B", "C"]})
        assert len(NameResolver.from_frame(frame)) == 1

    def test_missing_columns_raise(self) -> None:
        with pytest.raises(SchemaValidationError, match="name_new"):
            NameResolver.from_frame(pd.DataFrame({"abr_jkp": ["a"]}))

    def test_collation_key_strips_accents(self) -> None:
        assert collation_key("Émerging")[0] == "emerging"
