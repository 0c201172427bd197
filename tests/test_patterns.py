"""Tests for filter pattern normalization."""

import pytest

from hz_catalog.core.patterns import MATCH_ALL, normalize


@pytest.mark.unit
class TestNormalize:
    def test_none_matches_all(self):
        assert normalize(None) == "%"

    def test_empty_matches_all(self):
        assert normalize("") == MATCH_ALL

    @pytest.mark.parametrize("value", ["person", "pers%", "_", "%", " "])
    def test_non_empty_unchanged(self, value):
        assert normalize(value) == value
