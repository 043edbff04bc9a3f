"""Diet plan generation endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from diet_planner.domain.errors import (
    FoodCatalogExhausted,
    InvalidProfile,
    ProfileNotFound,
)
from diet_planner.services.assembler import plan_payload

if TYPE_CHECKING:
    from diet_planner.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}/diet-plans", tags=["diet-plans"])


@router.post("")
async def generate_diet_plan(
    user_id: UUID, request: Request, plan_date: date | None = None
) -> dict[str, object]:
    """Generate (or regenerate) the plan for a day, defaulting to today."""
    container: AppContainer = request.app.state.container
    try:
        plan = await container.diet_plan_service.generate_for_user(user_id, plan_date)
    except ProfileNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidProfile as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except FoodCatalogExhausted as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return plan_payload(plan)


@router.get("/{plan_date}")
async def get_diet_plan(
    user_id: UUID, plan_date: date, request: Request
) -> dict[str, object]:
    """Return the stored plan for a day."""
    container: AppContainer = request.app.state.container
    plan = await container.diet_plan_service.get_plan(user_id, plan_date)
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return plan_payload(plan)
