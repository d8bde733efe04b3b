"""RSVP routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from guestbook.application.usecase.rsvp import (
    CreateRsvpRequest,
    CreateRsvpUseCase,
    ListRsvpsUseCase,
    RsvpItem,
)
from guestbook.domain.error import ValidationError

router = APIRouter(prefix="/api/rsvp", tags=["rsvp"], route_class=DishkaRoute)


class CreateRsvpAPIRequest(BaseModel):
    """API request for confirming attendance."""

    name: Any = None
    presence: Any = None  # 1 = attending, 2 = not attending
    guests: Any = None


@router.get("", response_model=list[RsvpItem])
async def list_rsvps(
    list_rsvps_use_case: FromDishka[ListRsvpsUseCase],
) -> list[RsvpItem]:
    """Get every RSVP, newest first."""
    return await list_rsvps_use_case.execute()


@router.post("", response_model=RsvpItem, status_code=status.HTTP_201_CREATED)
async def create_rsvp(
    request: CreateRsvpAPIRequest,
    create_rsvp_use_case: FromDishka[CreateRsvpUseCase],
) -> RsvpItem:
    """Confirm attendance.

    Args:
        request: RSVP data (name, presence, optional guests)
        create_rsvp_use_case: Create RSVP use case from DI

    Returns:
        Created RSVP

    Raises:
        HTTPException: 400 if name or presence is missing
    """
    try:
        # exclude_unset keeps "presence was not sent" distinct from null
        use_case_request = CreateRsvpRequest(**request.model_dump(exclude_unset=True))
        return await create_rsvp_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
