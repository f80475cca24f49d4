"""
Per-category completion scoring.

points = round_half_up(weight * completed / total), computed on exact fractions so
identical input always gives identical points.
"""
import logging
from collections.abc import Mapping
from fractions import Fraction
from math import floor
from typing import Any, List, NamedTuple, Tuple

from pydantic import BaseModel

from playerhub.core.categories import Category

logger = logging.getLogger(__name__)

_HALF = Fraction(1, 2)


class CategoryScore(NamedTuple):
    completed: int
    total: int
    points: int


def round_half_up(value: Fraction) -> int:
    return floor(value + _HALF)


def as_profile_mapping(profile: Any) -> Mapping:
    """Normalize a profile to the camelCase mapping the field keys refer to."""
    if isinstance(profile, BaseModel):
        return profile.model_dump(by_alias=True, exclude_none=True)
    if isinstance(profile, Mapping):
        return profile
    # Anything else has no readable fields
    return {}


def field_statuses(profile: Mapping, category: Category) -> List[Tuple[str, bool]]:
    return [(spec.label, spec.is_complete(profile)) for spec in category.fields]


def score_statuses(statuses: List[Tuple[str, bool]], weight: int) -> CategoryScore:
    total = len(statuses)
    completed = sum(1 for _, done in statuses if done)
    points = round_half_up(Fraction(weight * completed, total))
    return CategoryScore(completed, total, points)


def evaluate_category(
    profile: Mapping, category: Category
) -> Tuple[List[Tuple[str, bool]], CategoryScore]:
    """Field statuses and score for one category of an already-normalized profile."""
    statuses = field_statuses(profile, category)
    score = score_statuses(statuses, category.weight)
    logger.debug(
        f"Category {category.key}: {score.completed}/{score.total} fields, {score.points}/{category.weight} points"
    )
    return statuses, score


def score_category(profile: Any, category: Category) -> CategoryScore:
    _, score = evaluate_category(as_profile_mapping(profile), category)
    return score
