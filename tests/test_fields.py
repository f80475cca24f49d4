#!/usr/bin/env python3
import os
import sys

import pytest

# Add server root to import path (matches existing test style in this repo)
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playerhub.core.errors import ConfigurationError
from playerhub.core.fields import FieldKind, FieldSpec, is_complete, parse_key


def test_text_treats_none_and_empty_string_as_missing():
    assert not is_complete(None, FieldKind.TEXT)
    assert not is_complete("", FieldKind.TEXT)
    assert is_complete("Striker", FieldKind.TEXT)


def test_text_does_not_trim_whitespace():
    assert is_complete(" ", FieldKind.TEXT)


def test_number_counts_zero_and_false_as_present():
    assert is_complete(0, FieldKind.NUMBER)
    assert is_complete(0.0, FieldKind.NUMBER)
    assert is_complete(False, FieldKind.NUMBER)
    assert not is_complete(None, FieldKind.NUMBER)


def test_collection_requires_at_least_one_element():
    assert not is_complete([], FieldKind.COLLECTION)
    assert not is_complete((), FieldKind.COLLECTION)
    assert is_complete(["Arabic"], FieldKind.COLLECTION)
    # A string is not a collection of entries
    assert not is_complete("Arabic", FieldKind.COLLECTION)


def test_mapping_requires_at_least_one_key():
    assert not is_complete({}, FieldKind.MAPPING)
    assert not is_complete(["instagram"], FieldKind.MAPPING)
    assert is_complete({"instagram": "@player"}, FieldKind.MAPPING)


def test_measurement_needs_value_not_just_unit():
    assert not is_complete({"unit": "cm"}, FieldKind.MEASUREMENT)
    assert not is_complete({"value": None, "unit": "cm"}, FieldKind.MEASUREMENT)
    assert not is_complete({"value": "", "unit": "cm"}, FieldKind.MEASUREMENT)
    assert not is_complete(182, FieldKind.MEASUREMENT)
    assert is_complete({"value": 182, "unit": "cm"}, FieldKind.MEASUREMENT)
    assert is_complete({"value": 0, "unit": "cm"}, FieldKind.MEASUREMENT)


def test_nested_path_resolves_through_mappings():
    spec = FieldSpec("location.country", "Country")

    assert spec.is_complete({"location": {"country": "Egypt"}})
    assert not spec.is_complete({"location": {"city": "Cairo"}})
    assert not spec.is_complete({"location": None})
    assert not spec.is_complete({})


def test_non_mapping_intermediate_is_missing_not_an_error():
    spec = FieldSpec("currentClub.clubName", "Current Club")

    assert not spec.is_complete({"currentClub": "Al Ahly"})
    assert not spec.is_complete({"currentClub": ["Al Ahly"]})
    assert not spec.is_complete({"currentClub": 7})


def test_unknown_keys_are_ignored():
    spec = FieldSpec("position", "Position")
    assert not spec.is_complete({"positon": "Striker", "favouriteColour": "blue"})


def test_kind_accepts_plain_strings():
    spec = FieldSpec("languages", "Languages", "collection")
    assert spec.kind is FieldKind.COLLECTION


def test_parse_key_splits_dotted_paths():
    assert parse_key("location.city") == ("location", "city")
    assert parse_key("bio") == ("bio",)


@pytest.mark.parametrize("key", ["", ".bio", "location..city", "location."])
def test_malformed_keys_are_rejected(key):
    with pytest.raises(ConfigurationError):
        FieldSpec(key, "Broken")


def test_unknown_kind_is_rejected():
    with pytest.raises(ConfigurationError):
        FieldSpec("bio", "Bio", "paragraph")


def test_empty_label_is_rejected():
    with pytest.raises(ConfigurationError):
        FieldSpec("bio", "")
