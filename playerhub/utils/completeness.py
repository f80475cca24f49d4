"""
Profile completion calculator for player profiles
Scoring: core(40%) + personal(20%) + physical(15%) + career(15%) + media(10%)

Each category is rounded on its own before summing, so the breakdown always adds up
to the reported percentage.
"""
from typing import Any, List, Optional

from playerhub.core.categories import BONUS_FIELDS, PLAYER_CATEGORIES, CategoryTable
from playerhub.core.scoring import as_profile_mapping, evaluate_category
from playerhub.models import CategoryBreakdownEntry, CompletionResult, FieldStatus


def calculate_completion(profile: Any, table: Optional[CategoryTable] = None) -> CompletionResult:
    """
    Calculate profile completion percentage

    Returns a CompletionResult with:
        - percentage: int (0-100), sum of per-category points
        - completed_fields / missing_fields: labels in category-then-field order
        - total_fields / completed_count
    """
    if table is None:
        table = PLAYER_CATEGORIES
    data = as_profile_mapping(profile)

    completed: List[str] = []
    missing: List[str] = []
    percentage = 0

    for category in table:
        statuses, score = evaluate_category(data, category)
        for label, done in statuses:
            if done:
                completed.append(label)
            else:
                missing.append(label)
        percentage += score.points

    return CompletionResult(
        percentage=percentage,
        completed_fields=completed,
        missing_fields=missing,
        total_fields=len(completed) + len(missing),
        completed_count=len(completed),
    )


def get_completion_breakdown(
    profile: Any, table: Optional[CategoryTable] = None
) -> List[CategoryBreakdownEntry]:
    """Per-category completion, one entry per category in table order."""
    if table is None:
        table = PLAYER_CATEGORIES
    data = as_profile_mapping(profile)

    breakdown = []
    for category in table:
        statuses, score = evaluate_category(data, category)
        breakdown.append(CategoryBreakdownEntry(
            key=category.key,
            name=category.name,
            weight=category.weight,
            completed=score.completed,
            total=score.total,
            percentage=score.points,
            fields=[FieldStatus(label=label, completed=done) for label, done in statuses],
        ))
    return breakdown


def get_bonus_fields(profile: Any) -> List[FieldStatus]:
    """Extra fields worth filling in; they never count towards the percentage."""
    data = as_profile_mapping(profile)
    return [
        FieldStatus(label=spec.label, completed=spec.is_complete(data))
        for spec in BONUS_FIELDS
    ]


def suggest_next_category(
    profile: Any, table: Optional[CategoryTable] = None
) -> Optional[CategoryBreakdownEntry]:
    """Category the user should fill in next, or None for a complete profile."""
    return pick_next_category(get_completion_breakdown(profile, table))


def pick_next_category(
    breakdown: List[CategoryBreakdownEntry]
) -> Optional[CategoryBreakdownEntry]:
    """
    Most points still unclaimed wins; ties go to the earlier category in the table.
    A category whose rounding already reached full weight is still picked while
    it has missing fields.
    """
    best = None
    best_rank = (0, False)
    for entry in breakdown:
        rank = (entry.weight - entry.percentage, entry.completed < entry.total)
        if rank > best_rank:
            best, best_rank = entry, rank
    return best
