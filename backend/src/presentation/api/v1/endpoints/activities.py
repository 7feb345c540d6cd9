"""Activity CRUD endpoints."""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from application.services import ActivityService
from domain.value_objects import ActivityQuery
from presentation.schemas import (
    ActivityCreateRequest,
    ActivityUpdateRequest,
    ActivityResponse,
    ActivityListResponse,
    ErrorResponse,
)
from presentation.api.v1.dependencies import get_activity_service

router = APIRouter(prefix="/activities", tags=["activities"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create(
    request: ActivityCreateRequest,
    service: ActivityService = Depends(get_activity_service),
) -> ActivityResponse:
    """Create an activity after checking its answer options."""
    activity = await service.create(
        activity_type=request.type,
        options=[option.to_value_object() for option in request.options],
        active=request.active,
        search=request.search,
    )
    return ActivityResponse.model_validate(activity)


@router.get("", response_model=ActivityListResponse)
async def find_all(
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int = Query(10, ge=1, alias="pageSize", description="Activities per page"),
    order_by: str = Query("createdAt", alias="orderBy", description="Field to sort on"),
    order_direction: str = Query(
        "desc",
        alias="orderDirection",
        description="'asc' sorts ascending, anything else descending",
    ),
    search: Optional[str] = Query(None, description="Case-insensitive substring of the search field"),
    active: Optional[bool] = Query(None, description="Only activities with this active flag"),
    service: ActivityService = Depends(get_activity_service),
) -> ActivityListResponse:
    """List activities one page at a time."""
    query = ActivityQuery(
        page=page,
        page_size=page_size,
        order_by=order_by,
        order_direction=order_direction,
        search=search,
        active=active,
    )
    activities, total = await service.find_all(query)
    
    return ActivityListResponse(
        items=[ActivityResponse.model_validate(activity) for activity in activities],
        total=total,
        page=query.page,
        page_size=query.page_size,
        total_pages=query.total_pages(total),
    )


@router.get("/{activity_id}", response_model=ActivityResponse, responses=NOT_FOUND)
async def find_one(
    activity_id: str,
    service: ActivityService = Depends(get_activity_service),
) -> ActivityResponse:
    """Get a single activity."""
    activity = await service.find_one(activity_id)
    return ActivityResponse.model_validate(activity)


@router.put("/{activity_id}", response_model=ActivityResponse, responses=NOT_FOUND)
@router.patch(
    "/{activity_id}",
    response_model=ActivityResponse,
    responses=NOT_FOUND,
    name="partial_update",
)
async def update(
    activity_id: str,
    request: ActivityUpdateRequest,
    service: ActivityService = Depends(get_activity_service),
) -> ActivityResponse:
    """Overwrite the fields sent in the body; other fields are kept."""
    activity = await service.update(activity_id, request.to_changes())
    return ActivityResponse.model_validate(activity)


@router.delete(
    "/{activity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def remove(
    activity_id: str,
    service: ActivityService = Depends(get_activity_service),
) -> Response:
    """Delete an activity."""
    await service.remove(activity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
