"""
Category definition table for profile completion.

Scoring: core(40%) + personal(20%) + physical(15%) + career(15%) + media(10%)
"""
import json
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from playerhub.core.errors import ConfigurationError
from playerhub.core.fields import FieldKind, FieldSpec
from playerhub.core.validate import validate_table_document

logger = logging.getLogger(__name__)

TOTAL_WEIGHT = 100


@dataclass(frozen=True)
class Category:
    key: str
    name: str
    weight: int
    fields: Tuple[FieldSpec, ...]

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))
        if not self.key:
            raise ConfigurationError("Category key must not be empty")
        # bool is an int subclass, reject it explicitly
        if isinstance(self.weight, bool) or not isinstance(self.weight, int) or self.weight < 0:
            raise ConfigurationError(
                f"Category {self.key!r} weight must be a non-negative integer, got {self.weight!r}"
            )
        if not self.fields:
            raise ConfigurationError(f"Category {self.key!r} has no fields")
        seen = set()
        for spec in self.fields:
            if spec.label in seen:
                raise ConfigurationError(
                    f"Duplicate field label {spec.label!r} in category {self.key!r}"
                )
            seen.add(spec.label)


class CategoryTable:
    """Ordered, read-only set of categories whose weights add up to 100."""

    def __init__(self, categories):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._validate()
        logger.info(
            f"Category table ready: {len(self._categories)} categories, {self.total_fields} fields"
        )

    def _validate(self):
        if not self._categories:
            raise ConfigurationError("Category table is empty")

        keys = set()
        owner: Dict[str, str] = {}
        for category in self._categories:
            if category.key in keys:
                raise ConfigurationError(f"Duplicate category key {category.key!r}")
            keys.add(category.key)
            for spec in category.fields:
                if spec.key in owner:
                    raise ConfigurationError(
                        f"Field {spec.key!r} appears in both {owner[spec.key]!r} and {category.key!r}"
                    )
                owner[spec.key] = category.key

        total = sum(c.weight for c in self._categories)
        if total != TOTAL_WEIGHT:
            raise ConfigurationError(
                f"Category weights must sum to {TOTAL_WEIGHT}, got {total}"
            )

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __getitem__(self, key: str) -> Category:
        for category in self._categories:
            if category.key == key:
                return category
        raise KeyError(key)

    @property
    def total_fields(self) -> int:
        return sum(len(c.fields) for c in self._categories)

    def describe(self) -> List[dict]:
        return [
            {
                "key": c.key,
                "name": c.name,
                "weight": c.weight,
                "fields": [
                    {"key": f.key, "label": f.label, "kind": f.kind.value} for f in c.fields
                ],
            }
            for c in self._categories
        ]


# Player profile table
PLAYER_CATEGORIES = CategoryTable([
    Category("core", "Core Information", 40, (
        FieldSpec("primarySport", "Primary Sport"),
        FieldSpec("position", "Position"),
        FieldSpec("level", "Level"),
        FieldSpec("status", "Status"),
        FieldSpec("location.country", "Country"),
        FieldSpec("location.city", "City"),
    )),
    Category("personal", "Personal Details", 20, (
        FieldSpec("bio", "Bio (English)"),
        FieldSpec("bioAr", "Bio (Arabic)"),
        FieldSpec("birthDate", "Birth Date"),
        FieldSpec("nationality", "Nationality"),
        FieldSpec("languages", "Languages", FieldKind.COLLECTION),
    )),
    Category("physical", "Physical Attributes", 15, (
        FieldSpec("height", "Height", FieldKind.MEASUREMENT),
        FieldSpec("weight", "Weight", FieldKind.MEASUREMENT),
        FieldSpec("preferredFoot", "Preferred Foot"),
    )),
    Category("career", "Experience & Career", 15, (
        FieldSpec("yearsOfExperience", "Years of Experience", FieldKind.NUMBER),
        FieldSpec("currentClub.clubName", "Current Club"),
        FieldSpec("previousClubs", "Previous Clubs", FieldKind.COLLECTION),
        FieldSpec("achievements", "Achievements", FieldKind.COLLECTION),
    )),
    Category("media", "Media & Showcase", 10, (
        FieldSpec("avatar", "Profile Picture"),
        FieldSpec("bannerImage", "Banner Image"),
        FieldSpec("photos", "Photos", FieldKind.COLLECTION),
        FieldSpec("videos", "Videos", FieldKind.COLLECTION),
        FieldSpec("highlightVideoUrl", "Highlight Video"),
    )),
])

# Tracked but never counted towards the 100%
BONUS_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("goals", "Career Goals"),
    FieldSpec("additionalSports", "Additional Sports", FieldKind.COLLECTION),
    FieldSpec("socialMedia", "Social Media", FieldKind.MAPPING),
    FieldSpec("certificates", "Certificates", FieldKind.COLLECTION),
    FieldSpec("previousClubs", "Previous Clubs", FieldKind.COLLECTION),
    FieldSpec("trainingAvailability", "Training Availability", FieldKind.COLLECTION),
)


def table_from_dict(data: dict) -> CategoryTable:
    """Build a CategoryTable from its JSON document form."""
    validate_table_document(data)
    categories = []
    for raw in data["categories"]:
        specs = tuple(
            FieldSpec(f["key"], f["label"], FieldKind(f.get("kind", FieldKind.TEXT.value)))
            for f in raw["fields"]
        )
        categories.append(Category(raw["key"], raw["name"], raw["weight"], specs))
    return CategoryTable(categories)


def load_category_table(path: Optional[str] = None) -> CategoryTable:
    """
    Load a category table from a JSON file, or return the built-in player table.

    Raises ConfigurationError when the file is unreadable or invalid.
    """
    if not path:
        return PLAYER_CATEGORIES

    logger.info(f"Loading category table from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read category table {path}: {e}")
        raise ConfigurationError(f"Cannot read category table {path}: {e}") from e

    try:
        return table_from_dict(data)
    except ConfigurationError as e:
        logger.error(f"Invalid category table {path}: {e}")
        raise
