import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from playerhub.core.categories import CategoryTable
from playerhub.models import (
    PlayerProfile, CompletionResult, BreakdownResponse, CategoryTableResponse
)
from playerhub.utils.completeness import (
    calculate_completion, get_completion_breakdown, get_bonus_fields, pick_next_category
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_category_table(request: Request) -> CategoryTable:
    """Table built once at startup, see playerhub.main.create_app"""
    return request.app.state.category_table


@router.post("/profile/completion", response_model=CompletionResult)
def profile_completion(
    profile: PlayerProfile,
    table: CategoryTable = Depends(get_category_table)
):
    """
    POST /api/v1/profile/completion
    Score a profile and list completed/missing fields
    """
    logger.info("=== PROFILE COMPLETION START ===")
    try:
        result = calculate_completion(profile, table)
        logger.info(
            f"=== PROFILE COMPLETION SUCCESS === {result.percentage}% "
            f"({result.completed_count}/{result.total_fields} fields)"
        )
        return result
    except Exception as e:
        logger.error(f"=== PROFILE COMPLETION ERROR === Error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to calculate completion: {str(e)}")


@router.post("/profile/completion/breakdown", response_model=BreakdownResponse)
def profile_completion_breakdown(
    profile: PlayerProfile,
    table: CategoryTable = Depends(get_category_table)
):
    """
    POST /api/v1/profile/completion/breakdown
    Per-category completion, the section to fill next and bonus fields
    """
    logger.info("=== COMPLETION BREAKDOWN START ===")
    try:
        breakdown = get_completion_breakdown(profile, table)
        percentage = sum(entry.percentage for entry in breakdown)
        next_category = pick_next_category(breakdown)
        logger.info(
            f"=== COMPLETION BREAKDOWN SUCCESS === {percentage}%, "
            f"next: {next_category.key if next_category else 'none'}"
        )
        return BreakdownResponse(
            percentage=percentage,
            categories=breakdown,
            next_category=next_category,
            bonus_fields=get_bonus_fields(profile),
        )
    except Exception as e:
        logger.error(f"=== COMPLETION BREAKDOWN ERROR === Error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to build breakdown: {str(e)}")


@router.get("/completion/categories", response_model=CategoryTableResponse)
def completion_categories(table: CategoryTable = Depends(get_category_table)):
    """
    GET /api/v1/completion/categories
    Describe the active category table (names, weights, fields)
    """
    return CategoryTableResponse(
        total_fields=table.total_fields,
        categories=table.describe(),
    )
