"""Assertion helpers raising :class:`AssertionFailedError` on failure.

Every helper takes the value(s) under test followed by a caller supplied
``message``.  On success it returns ``None``; on failure it raises
:class:`~qanexus.utils.errors.AssertionFailedError` whose message is the
caller's text followed by a computed detail such as
``" Expected: 1, but was: 2"``.  The first failure raises immediately; there is
no soft or collecting mode.

Property helpers accept mappings (looked up by key) and arbitrary objects
(looked up by attribute name).  :func:`assert_equals` is a single ``==``
comparison while :func:`assert_deep_equals` walks containers, dataclasses and
plain objects recursively and also requires the types to agree.
"""

from __future__ import annotations

import array
import dataclasses
import numbers
import os
import re
from collections.abc import Callable, Collection, Iterable, Mapping, Sequence
from datetime import date, datetime
from typing import Any
from urllib.parse import urlparse

from ..datagen.tables import SupportedDateFormat
from ..utils.errors import AssertionFailedError

Number = numbers.Real

_EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,7}$"
)
_URL_SCHEMES = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})
_HOST_SCHEMES = frozenset({"http", "https", "ftp"})
_DATE_TOKEN_RX = re.compile(r"yyyy|yy|MMM|MM|dd|HH|mm|ss|SSS")
_STRPTIME = {
    "yyyy": "%Y",
    "yy": "%y",
    "MMM": "%b",
    "MM": "%m",
    "dd": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
    "SSS": "%f",
}

_color: bool | None = None


def use_color(enabled: bool | None) -> None:
    """Force ANSI colour on or off; ``None`` defers to ``NO_COLOR``."""

    global _color
    _color = enabled


def _fail(message: str, detail: str = "") -> AssertionFailedError:
    color = _color if _color is not None else "NO_COLOR" not in os.environ
    return AssertionFailedError(message + detail, color=color)


def _is_number(obj: object) -> bool:
    return isinstance(obj, numbers.Number) and not isinstance(obj, bool)


def _is_plain_collection(obj: object) -> bool:
    return isinstance(obj, Collection) and not isinstance(obj, (str, bytes, bytearray))


def _deep_equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return bool(a == b)
    if type(a) is not type(b):
        return False
    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)
    if isinstance(a, Mapping):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k], seen) for k in a)
    if isinstance(a, (set, frozenset)):
        return bool(a == b)
    if isinstance(a, Sequence) and not isinstance(a, (str, bytes, bytearray)):
        return len(a) == len(b) and all(_deep_equal(x, y, seen) for x, y in zip(a, b))
    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), seen)
            for f in dataclasses.fields(a)
        )
    if a == b:
        return True
    if hasattr(a, "__dict__") and hasattr(b, "__dict__"):
        return _deep_equal(vars(a), vars(b), seen)
    return False


def deep_equal(a: Any, b: Any) -> bool:
    """Return ``True`` when ``a`` and ``b`` are structurally equal."""

    return _deep_equal(a, b, set())


def _has_property(obj: Any, name: str) -> bool:
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def _to_strptime(fmt: SupportedDateFormat | str) -> str:
    layout = fmt.value if isinstance(fmt, SupportedDateFormat) else fmt
    if "%" in layout:
        return layout
    return _DATE_TOKEN_RX.sub(lambda m: _STRPTIME[m.group(0)], layout)


# ---------------------------------------------------------------------------
# Existence and truth


def assert_is_null(obj: object, message: str) -> None:
    if obj is not None:
        raise _fail(message)


def assert_is_null_or_undefined(obj: object, message: str) -> None:
    if obj is not None:
        raise _fail(message)


def assert_is_not_null_or_undefined(obj: object, message: str) -> None:
    if obj is None:
        raise _fail(message)


def assert_is_true(condition: bool, message: str) -> None:
    if not condition:
        raise _fail(message)


def assert_is_false(condition: bool, message: str) -> None:
    if condition:
        raise _fail(message)


# ---------------------------------------------------------------------------
# Type and shape


def assert_is_number(obj: object, message: str) -> None:
    if not _is_number(obj):
        raise _fail(message)


def assert_is_not_number(obj: object, message: str) -> None:
    if _is_number(obj):
        raise _fail(message)


def assert_is_type_of(expected_type: type, obj: object, message: str) -> None:
    if not isinstance(obj, expected_type):
        raise _fail(
            message,
            f" Expected type: {expected_type.__name__}, but was: {type(obj).__name__}",
        )


def assert_instance_of(expected_class: type, obj: object, message: str) -> None:
    if not isinstance(obj, expected_class):
        raise _fail(message, f" Object is not an instance of: {expected_class.__name__}")


def assert_is_function(obj: object, message: str) -> None:
    if not callable(obj):
        raise _fail(message, " Object is not a function")


def assert_is_array(obj: object, message: str) -> None:
    if not isinstance(obj, (list, tuple, array.array)):
        raise _fail(message, " Object is not an array")


def assert_is_not_array(obj: object, message: str) -> None:
    if isinstance(obj, (list, tuple, array.array)):
        raise _fail(message, " Object is an array, but should not be")


def assert_date(obj: object, message: str) -> None:
    if not isinstance(obj, (date, datetime)):
        raise _fail(message, " Object is not a Date")


def assert_object_has_property(obj: Any, property_name: str, message: str) -> None:
    if not _has_property(obj, property_name):
        raise _fail(message, f" Object does not have property: {property_name}")


def assert_has_property_value(
    obj: Any, property_name: str, expected_value: object, message: str
) -> None:
    """Assert ``obj.property_name`` (or ``obj[property_name]``) equals a value.

    A missing mapping key reads as ``None``; a missing attribute is reported
    as inaccessible.
    """

    if isinstance(obj, Mapping):
        value = obj.get(property_name)
    else:
        try:
            value = getattr(obj, property_name)
        except AttributeError as exc:
            raise _fail(message, f" Failed to access property: {property_name}") from exc
    if not expected_value == value:
        raise _fail(message, f" Expected value: {expected_value}, but was: {value}")


def assert_object_has_keys(obj: Mapping[Any, Any], keys: Iterable[Any], message: str) -> None:
    for key in keys:
        if key not in obj:
            raise _fail(message, f" Object is missing key: {key}")


def assert_object_includes(obj: Mapping[Any, Any], value: object, message: str) -> None:
    if value not in obj.values():
        raise _fail(message, f" Object does not include value: {value}")


# ---------------------------------------------------------------------------
# Equality


def assert_equals(expected: object, actual: object, message: str) -> None:
    if not expected == actual:
        raise _fail(message, f" Expected: {expected}, but was: {actual}")


def assert_deep_equals(expected: object, actual: object, message: str) -> None:
    if not deep_equal(expected, actual):
        raise _fail(message, f" Expected: {expected}, but was: {actual}")


def assert_close_to(actual: Number, expected: Number, delta: Number, message: str) -> None:
    if abs(actual - expected) > delta:
        raise _fail(
            message, f" Expected: {actual} to be close to: {expected} within: {delta}"
        )


def assert_function_returns(expected_value: object, func: Callable[[], Any], message: str) -> None:
    result = func()
    if not expected_value == result:
        raise _fail(message, f" Expected return: {expected_value}, but was: {result}")


# ---------------------------------------------------------------------------
# Ordering and ranges


def assert_in_range(value: Number, min_value: Number, max_value: Number, message: str) -> None:
    """Assert ``min_value < value < max_value``."""

    if value <= min_value or value >= max_value:
        raise _fail(message, f" Expected: {min_value} < {value} < {max_value}")


def assert_in_range_included(
    value: Number, min_value: Number, max_value: Number, message: str
) -> None:
    """Assert ``min_value <= value <= max_value``."""

    if value < min_value or value > max_value:
        raise _fail(message, f" Expected: {min_value} <= {value} <= {max_value}")


def assert_greater_than(value: Number, reference: Number, message: str) -> None:
    if value <= reference:
        raise _fail(message, f" Expected: {value} > {reference}")


def assert_greater_than_or_equal(value: Number, reference: Number, message: str) -> None:
    if value < reference:
        raise _fail(message, f" Expected: {value} >= {reference}")


def assert_less_than(value: Number, reference: Number, message: str) -> None:
    if value >= reference:
        raise _fail(message, f" Expected: {value} < {reference}")


def assert_less_than_or_equal(value: Number, reference: Number, message: str) -> None:
    if value > reference:
        raise _fail(message, f" Expected: {value} <= {reference}")


# ---------------------------------------------------------------------------
# Collections


def assert_collection_contains(collection: Collection[Any], element: object, message: str) -> None:
    if element not in collection:
        raise _fail(message, f" Collection does not contain: {element}")


def assert_subset_of(
    subset: Collection[Any], superset: Collection[Any], message: str
) -> None:
    if not all(item in superset for item in subset):
        raise _fail(message, " Expected subset, but was not found")


def assert_disjoint(
    collection1: Collection[Any], collection2: Collection[Any], message: str
) -> None:
    for item in collection1:
        if item in collection2:
            raise _fail(message, f" Collections are not disjoint; common element: {item}")


def assert_is_collection_empty(collection: Collection[Any], message: str) -> None:
    if len(collection) != 0:
        raise _fail(message, " Expected empty collection, but was not.")


def assert_collection_is_not_empty(collection: Collection[Any], message: str) -> None:
    if len(collection) == 0:
        raise _fail(message, " Expected non-empty collection, but was empty.")


def assert_collection_length(
    collection: Collection[Any], expected_length: int, message: str
) -> None:
    if len(collection) != expected_length:
        raise _fail(message, f" Expected length: {expected_length}, but was: {len(collection)}")


def assert_array_length(array_: Sequence[Any], expected_length: int, message: str) -> None:
    if len(array_) != expected_length:
        raise _fail(
            message, f" Expected array length: {expected_length}, but was: {len(array_)}"
        )


def assert_not_deep_include(collection: Iterable[Any], element: object, message: str) -> None:
    if any(deep_equal(item, element) for item in collection):
        raise _fail(message, f" Collection deeply includes: {element}")


def assert_nested_include(collection: Iterable[Any], nested_element: object, message: str) -> None:
    for element in collection:
        if _is_plain_collection(element) and nested_element in element:
            return
    raise _fail(message, f" Collection does not include nested element: {nested_element}")


def assert_not_nested_include(
    collection: Iterable[Any], nested_element: object, message: str
) -> None:
    for element in collection:
        if _is_plain_collection(element) and nested_element in element:
            raise _fail(message, f" Collection includes nested element: {nested_element}")


def _same_members(a: Collection[Any], b: Collection[Any]) -> bool:
    return all(item in b for item in a) and all(item in a for item in b)


def assert_collections_same_members(
    collection1: Collection[Any], collection2: Collection[Any], message: str
) -> None:
    if not _same_members(collection1, collection2):
        raise _fail(message, " Collections do not have the same members")


def assert_collection_not_same_members(
    collection1: Collection[Any], collection2: Collection[Any], message: str
) -> None:
    if _same_members(collection1, collection2):
        raise _fail(message, " Collections have the same members, but they should not")


def assert_empty_object(obj: object, message: str) -> None:
    """Assert a mapping, collection or string is empty; other objects pass."""

    if isinstance(obj, Mapping) and obj:
        raise _fail(message, " Expected empty map, but was not.")
    if isinstance(obj, str) and obj:
        raise _fail(message, " Expected empty string, but was not.")
    if _is_plain_collection(obj) and len(obj) != 0:  # type: ignore[arg-type]
        raise _fail(message, " Expected empty collection, but was not.")


def assert_object_is_empty(obj: object, message: str) -> None:
    """Assert a mapping or collection is empty; strings and objects pass."""

    if isinstance(obj, Mapping) and obj:
        raise _fail(message, " Expected empty map, but was not.")
    if _is_plain_collection(obj) and len(obj) != 0:  # type: ignore[arg-type]
        raise _fail(message, " Expected empty collection, but was not.")


def assert_object_is_not_empty(obj: object, message: str) -> None:
    if isinstance(obj, Mapping):
        if not obj:
            raise _fail(message, " Expected non-empty map, but was empty.")
    elif _is_plain_collection(obj) and len(obj) == 0:  # type: ignore[arg-type]
        raise _fail(message, " Expected non-empty collection, but was empty.")


# ---------------------------------------------------------------------------
# Strings


def assert_string_length(value: str, expected_length: int, message: str) -> None:
    if len(value) != expected_length:
        raise _fail(message, f" Expected length: {expected_length}, but was: {len(value)}")


def assert_string_contains(value: str, substring: str, message: str) -> None:
    if substring not in value:
        raise _fail(message, f" String does not contain: {substring}")


def assert_string_starts_with(value: str, prefix: str, message: str) -> None:
    if not value.startswith(prefix):
        raise _fail(message, f" String does not start with: {prefix}")


def assert_string_ends_with(value: str, suffix: str, message: str) -> None:
    if not value.endswith(suffix):
        raise _fail(message, f" String does not end with: {suffix}")


def assert_string_matches_regex(value: str, regex: str, message: str) -> None:
    """Assert the whole of ``value`` matches ``regex``."""

    if re.fullmatch(regex, value) is None:
        raise _fail(message, f" String does not match pattern: {regex}")


def assert_string_not_matches_regex(value: str, regex: str, message: str) -> None:
    if re.fullmatch(regex, value) is not None:
        raise _fail(message, f" String matches pattern: {regex}")


def assert_string_matches_pattern(value: str, pattern: re.Pattern[str], message: str) -> None:
    if pattern.fullmatch(value) is None:
        raise _fail(message, f" String does not match pattern: {pattern.pattern}")


def assert_string_is_empty(value: str, message: str) -> None:
    if value:
        raise _fail(message, " Expected empty string, but was not.")


def assert_string_is_not_empty(value: str, message: str) -> None:
    if not value:
        raise _fail(message, " Expected non-empty string, but was empty.")


def assert_date_format(value: str, fmt: SupportedDateFormat | str, message: str) -> None:
    """Assert ``value`` parses with ``fmt``.

    ``fmt`` is a :class:`SupportedDateFormat`, a token layout such as
    ``"dd/MMM/yyyy"`` or a ``strptime`` format containing ``%`` directives.
    """

    layout = fmt.value if isinstance(fmt, SupportedDateFormat) else fmt
    try:
        datetime.strptime(value, _to_strptime(fmt))
    except ValueError as exc:
        raise _fail(message, f" Date does not match format: {layout}") from exc


def assert_valid_url(value: str, message: str) -> None:
    parsed = urlparse(value)
    scheme = parsed.scheme.lower()
    valid = scheme in _URL_SCHEMES and (bool(parsed.netloc) or scheme not in _HOST_SCHEMES)
    if not valid:
        raise _fail(message, " String is not a valid URL")


def assert_valid_email(email: str, message: str) -> None:
    if _EMAIL_RX.fullmatch(email) is None:
        raise _fail(message, " Email address is not valid")


# ---------------------------------------------------------------------------
# Numeric predicates


def assert_zero(value: Number, message: str) -> None:
    if value != 0:
        raise _fail(message, f" Expected: {value} to be zero")


def assert_not_zero(value: Number, message: str) -> None:
    if value == 0:
        raise _fail(message, f" Expected: {value} not to be zero")


def assert_positive(value: Number, message: str) -> None:
    if value <= 0:
        raise _fail(message, f" Expected: {value} to be positive")


def assert_negative(value: Number, message: str) -> None:
    if value >= 0:
        raise _fail(message, f" Expected: {value} to be negative")


def assert_odd(value: Number, message: str) -> None:
    """Assert the integer part of ``value`` is odd; negative values included."""

    if int(value) % 2 != 1:
        raise _fail(message, f" Expected: {value} to be odd")


def assert_even(value: Number, message: str) -> None:
    if int(value) % 2 != 0:
        raise _fail(message, f" Expected: {value} to be even")


def assert_is_increment_of(value: Number, reference: Number, message: str) -> None:
    if value != reference + 1:
        raise _fail(message, f" Expected: {value} to be increment of: {reference}")


def assert_not_increment_of(value: Number, reference: Number, message: str) -> None:
    if value == reference + 1:
        raise _fail(message, f" Expected: {value} not to be increment of: {reference}")


def assert_is_decrement_of(value: Number, reference: Number, message: str) -> None:
    if value != reference - 1:
        raise _fail(message, f" Expected: {value} to be decrement of: {reference}")


def assert_not_decrement_of(value: Number, reference: Number, message: str) -> None:
    if value == reference - 1:
        raise _fail(message, f" Expected: {value} not to be decrement of: {reference}")


# ---------------------------------------------------------------------------
# Exception behaviour


def assert_throws(func: Callable[[], Any], message: str) -> None:
    try:
        func()
    except Exception:
        return
    raise _fail(message)


def assert_function_throws(
    func: Callable[[], Any], expected_exception: type[BaseException], message: str
) -> None:
    try:
        func()
    except Exception as exc:
        if isinstance(exc, expected_exception):
            return
        raise _fail(
            message,
            f" Expected exception: {expected_exception.__name__}, "
            f"but was: {type(exc).__name__}",
        ) from exc
    raise _fail(message, " Expected exception, but none was thrown.")


def assert_function_does_not_throw(func: Callable[[], Any], message: str) -> None:
    try:
        func()
    except Exception as exc:
        raise _fail(
            message, f" Expected no exception, but caught: {type(exc).__name__}"
        ) from exc
