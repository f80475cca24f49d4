"""
Field presence evaluation for profile completion.

Every scored field is declared as a FieldSpec: a dotted camelCase key into the
profile (e.g. "location.country"), a display label and a FieldKind that picks the
emptiness rule. The accessor is compiled from the key once, when the FieldSpec is built.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Tuple

from playerhub.core.errors import ConfigurationError


class FieldKind(str, Enum):
    TEXT = "text"                # None and "" are missing
    NUMBER = "number"            # only None is missing, 0 and False count
    COLLECTION = "collection"    # list/tuple/set with at least one element
    MAPPING = "mapping"          # dict with at least one key
    MEASUREMENT = "measurement"  # {"value": ..., "unit": ...}, value must be set


COLLECTION_TYPES = (list, tuple, set, frozenset)

_MISSING = object()


def is_complete(value: Any, kind: FieldKind) -> bool:
    """Decide whether an already-resolved value counts as filled in."""
    if value is _MISSING or value is None:
        return False

    if kind == FieldKind.TEXT:
        return value != ""
    if kind == FieldKind.NUMBER:
        return True
    if kind == FieldKind.COLLECTION:
        return isinstance(value, COLLECTION_TYPES) and len(value) > 0
    if kind == FieldKind.MAPPING:
        return isinstance(value, Mapping) and len(value) > 0
    if kind == FieldKind.MEASUREMENT:
        # Unit alone does not count; a cleared input sends ""
        if not isinstance(value, Mapping):
            return False
        return value.get("value") not in (None, "")

    return False


def parse_key(key: str) -> Tuple[str, ...]:
    """Split a dotted key into path segments, rejecting empty segments."""
    if not isinstance(key, str) or not key:
        raise ConfigurationError(f"Field key must be a non-empty string, got {key!r}")
    segments = tuple(key.split("."))
    if any(not s for s in segments):
        raise ConfigurationError(f"Malformed field key: {key!r}")
    return segments


def make_accessor(path: Tuple[str, ...]) -> Callable[[Mapping], Any]:
    """Build a reader for `path`. Missing or non-mapping intermediates resolve to missing."""

    def read(profile: Mapping) -> Any:
        current: Any = profile
        for segment in path:
            if not isinstance(current, Mapping):
                return _MISSING
            current = current.get(segment, _MISSING)
            if current is _MISSING:
                return _MISSING
        return current

    return read


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    accessor: Callable[[Mapping], Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.label, str) or not self.label:
            raise ConfigurationError(f"Field {self.key!r} needs a non-empty label")
        try:
            kind = FieldKind(self.kind)
        except ValueError:
            raise ConfigurationError(f"Unknown field kind {self.kind!r} for {self.key!r}") from None
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "accessor", make_accessor(parse_key(self.key)))

    def resolve(self, profile: Mapping) -> Any:
        return self.accessor(profile)

    def is_complete(self, profile: Mapping) -> bool:
        return is_complete(self.resolve(profile), self.kind)
