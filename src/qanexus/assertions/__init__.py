"""Assertion helpers for tests and runtime checks.

Each ``assert_*`` function returns ``None`` when its predicate holds and
raises :class:`~qanexus.utils.errors.AssertionFailedError` otherwise.
"""

from __future__ import annotations

from ..config import ConfigModel
from ..utils.errors import AssertionFailedError
from .helpers import (
    assert_array_length,
    assert_close_to,
    assert_collection_contains,
    assert_collection_is_not_empty,
    assert_collection_length,
    assert_collection_not_same_members,
    assert_collections_same_members,
    assert_date,
    assert_date_format,
    assert_deep_equals,
    assert_disjoint,
    assert_empty_object,
    assert_equals,
    assert_even,
    assert_function_does_not_throw,
    assert_function_returns,
    assert_function_throws,
    assert_greater_than,
    assert_greater_than_or_equal,
    assert_has_property_value,
    assert_in_range,
    assert_in_range_included,
    assert_instance_of,
    assert_is_array,
    assert_is_collection_empty,
    assert_is_decrement_of,
    assert_is_false,
    assert_is_function,
    assert_is_increment_of,
    assert_is_not_array,
    assert_is_not_null_or_undefined,
    assert_is_not_number,
    assert_is_null,
    assert_is_null_or_undefined,
    assert_is_number,
    assert_is_true,
    assert_is_type_of,
    assert_less_than,
    assert_less_than_or_equal,
    assert_negative,
    assert_nested_include,
    assert_not_decrement_of,
    assert_not_deep_include,
    assert_not_increment_of,
    assert_not_nested_include,
    assert_not_zero,
    assert_object_has_keys,
    assert_object_has_property,
    assert_object_includes,
    assert_object_is_empty,
    assert_object_is_not_empty,
    assert_odd,
    assert_positive,
    assert_string_contains,
    assert_string_ends_with,
    assert_string_is_empty,
    assert_string_is_not_empty,
    assert_string_length,
    assert_string_matches_pattern,
    assert_string_matches_regex,
    assert_string_not_matches_regex,
    assert_string_starts_with,
    assert_subset_of,
    assert_throws,
    assert_valid_email,
    assert_valid_url,
    assert_zero,
    deep_equal,
    use_color,
)


def configure(cfg: ConfigModel) -> None:
    """Apply ``cfg.assertions`` to every helper in this package."""

    use_color(cfg.assertions.color)


__all__ = [
    "AssertionFailedError",
    "configure",
    "assert_array_length",
    "assert_close_to",
    "assert_collection_contains",
    "assert_collection_is_not_empty",
    "assert_collection_length",
    "assert_collection_not_same_members",
    "assert_collections_same_members",
    "assert_date",
    "assert_date_format",
    "assert_deep_equals",
    "assert_disjoint",
    "assert_empty_object",
    "assert_equals",
    "assert_even",
    "assert_function_does_not_throw",
    "assert_function_returns",
    "assert_function_throws",
    "assert_greater_than",
    "assert_greater_than_or_equal",
    "assert_has_property_value",
    "assert_in_range",
    "assert_in_range_included",
    "assert_instance_of",
    "assert_is_array",
    "assert_is_collection_empty",
    "assert_is_decrement_of",
    "assert_is_false",
    "assert_is_function",
    "assert_is_increment_of",
    "assert_is_not_array",
    "assert_is_not_null_or_undefined",
    "assert_is_not_number",
    "assert_is_null",
    "assert_is_null_or_undefined",
    "assert_is_number",
    "assert_is_true",
    "assert_is_type_of",
    "assert_less_than",
    "assert_less_than_or_equal",
    "assert_negative",
    "assert_nested_include",
    "assert_not_decrement_of",
    "assert_not_deep_include",
    "assert_not_increment_of",
    "assert_not_nested_include",
    "assert_not_zero",
    "assert_object_has_keys",
    "assert_object_has_property",
    "assert_object_includes",
    "assert_object_is_empty",
    "assert_object_is_not_empty",
    "assert_odd",
    "assert_positive",
    "assert_string_contains",
    "assert_string_ends_with",
    "assert_string_is_empty",
    "assert_string_is_not_empty",
    "assert_string_length",
    "assert_string_matches_pattern",
    "assert_string_matches_regex",
    "assert_string_not_matches_regex",
    "assert_string_starts_with",
    "assert_subset_of",
    "assert_throws",
    "assert_valid_email",
    "assert_valid_url",
    "assert_zero",
    "deep_equal",
    "use_color",
]
