"""Tests for preference validation and helpers."""

import pytest
from pydantic import ValidationError

from ethos.models import (
    DEFAULT_GUEST_PREFS,
    PreferenceProfile,
    TagKey,
    default_guest_prefs,
    is_valid_prefs,
    resolve_prefs,
    validate_prefs,
)
from ethos.score.prefs import get_top_weighted_tags, should_show_alternatives


class TestGuestPrefs:
    """Tests for the default guest preferences."""

    def test_covers_every_tag(self):
        assert set(DEFAULT_GUEST_PREFS) == {tag.value for tag in TagKey}

    def test_even_weights(self):
        assert all(weight == 0.5 for weight in DEFAULT_GUEST_PREFS.values())

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_GUEST_PREFS["lgbtq"] = 1.0

    def test_copy_is_independent(self):
        prefs = default_guest_prefs()
        prefs["lgbtq"] = 1.0
        assert DEFAULT_GUEST_PREFS["lgbtq"] == 0.5


class TestValidatePrefs:
    """Tests for preference validation."""

    def test_profile_fields_match_tags(self):
        assert set(PreferenceProfile.model_fields) == {tag.value for tag in TagKey}

    def test_fills_missing_tags_with_guest_weight(self):
        prefs = validate_prefs({"lgbtq": 0.9, "data_privacy": 0.0})
        assert len(prefs) == len(TagKey)
        assert prefs["lgbtq"] == 0.9
        assert prefs["data_privacy"] == 0.0
        assert prefs["child_labour"] == 0.5

    def test_rejects_unknown_tag(self):
        with pytest.raises(ValidationError):
            validate_prefs({"russia_ukraine": 0.5})

    def test_rejects_out_of_range_weight(self):
        with pytest.raises(ValidationError):
            validate_prefs({"lgbtq": 1.5})
        with pytest.raises(ValidationError):
            validate_prefs({"lgbtq": -0.1})

    def test_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            validate_prefs(["lgbtq"])

    def test_is_valid_prefs(self):
        assert is_valid_prefs({"animal_cruelty": 1.0})
        assert not is_valid_prefs({"animal_cruelty": 2.0})
        assert not is_valid_prefs({"unknown": 0.5})


class TestResolvePrefs:
    """Tests for choosing between stored and guest preferences."""

    def test_no_stored_prefs_uses_guest(self):
        assert resolve_prefs(None) == dict(DEFAULT_GUEST_PREFS)

    def test_stored_prefs_are_used(self):
        prefs = resolve_prefs({"environmentally_friendly": 1.0})
        assert prefs["environmentally_friendly"] == 1.0
        assert prefs["lgbtq"] == 0.5

    def test_invalid_stored_prefs_fall_back_to_guest(self):
        assert resolve_prefs({"bogus": 1.0}) == dict(DEFAULT_GUEST_PREFS)


class TestTopWeightedTags:
    """Tests for selecting the highest weighted tags."""

    def test_orders_by_weight(self):
        prefs = {"a": 0.2, "b": 0.9, "c": 0.5}
        assert get_top_weighted_tags(prefs, 2) == ["b", "c"]

    def test_ties_broken_alphabetically(self):
        prefs = {"zeta": 0.5, "alpha": 0.5, "mid": 0.7}
        assert get_top_weighted_tags(prefs, 2) == ["mid", "alpha"]

    def test_independent_of_insertion_order(self):
        first = {"x": 0.4, "y": 0.4, "z": 0.4}
        second = {"z": 0.4, "x": 0.4, "y": 0.4}
        assert get_top_weighted_tags(first, 2) == get_top_weighted_tags(second, 2) == ["x", "y"]

    def test_default_limit_on_guest_prefs(self):
        assert get_top_weighted_tags(DEFAULT_GUEST_PREFS) == [
            "animal_cruelty",
            "child_labour",
            "data_privacy",
        ]

    def test_limit_larger_than_prefs(self):
        assert get_top_weighted_tags({"a": 1.0}, 5) == ["a"]

    def test_non_positive_limit(self):
        assert get_top_weighted_tags({"a": 1.0}, 0) == []
        assert get_top_weighted_tags({"a": 1.0}, -1) == []

    def test_empty_prefs(self):
        assert get_top_weighted_tags({}) == []


class TestShouldShowAlternatives:
    """Tests for the alternatives threshold."""

    def test_below_threshold(self):
        assert should_show_alternatives(-0.3, -0.2) is True

    def test_above_threshold(self):
        assert should_show_alternatives(-0.1, -0.2) is False

    def test_at_threshold(self):
        assert should_show_alternatives(-0.2, -0.2) is False

    def test_default_threshold(self):
        assert should_show_alternatives(-0.5)
        assert not should_show_alternatives(0.0)
