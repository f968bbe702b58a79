from typing import List, Any, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.auth import get_current_user
from app.core.database import get_db
from app.crud import request as request_crud
from app.schemas.auth import Identity
from app.schemas.base import Message
from app.schemas.request import (
    Request, RequestCreate, RequestCreated, RequestStatusUpdate,
    RequestListItem, RecentRequest
)
from app.schemas.stats import RequestStats
from app.services import stats_service
from app.services.request_query import RequestFilter

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=RequestCreated, status_code=status.HTTP_201_CREATED)
async def create_request(
    *,
    db: AsyncSession = Depends(get_db),
    request_in: RequestCreate
) -> Any:
    """
    Submit a service request. Public, no token required.
    """
    request = await request_crud.create_request(db, request_in)
    logger.info(f"Request created: {request.id}")
    return {"message": "Request created successfully", "request": request}

@router.get("", response_model=List[RequestListItem])
async def get_requests(
    *,
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
    status: Optional[str] = Query(None, description="Exact status, or 'all'"),
    service: Optional[str] = Query(None, description="Exact service, or 'all'"),
    search: Optional[str] = Query(None, description="Case-insensitive text in name, email or service")
) -> Any:
    """
    Retrieve requests, newest first, with optional filtering.
    """
    request_filter = RequestFilter.from_params(status=status, service=service, search=search)
    logger.info(f"Fetching requests with filter: {request_filter}")
    return await request_crud.get_requests(db, request_filter)

@router.get("/stats", response_model=RequestStats)
async def get_request_stats(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Request totals, breakdowns by service and acquisition source, and
    average response time.
    """
    return await stats_service.get_request_stats(db)

@router.get("/recent", response_model=List[RecentRequest])
async def get_recent_requests(
    db: AsyncSession = Depends(get_db),
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    The ten most recent requests.
    """
    return await request_crud.get_recent_requests(db)

@router.put("/{request_id}", response_model=Request)
async def update_request_status(
    *,
    db: AsyncSession = Depends(get_db),
    request_id: str,
    status_in: RequestStatusUpdate,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Update the status of a request.
    """
    request = await request_crud.update_request_status(db, request_id, status_in.status)
    logger.info(f"Request {request_id} moved to status: {request.status.value}")
    return request

@router.delete("/{request_id}", response_model=Message)
async def delete_request(
    *,
    db: AsyncSession = Depends(get_db),
    request_id: str,
    current_user: Identity = Depends(get_current_user)
) -> Any:
    """
    Delete request.
    """
    await request_crud.delete_request(db, request_id)
    logger.info(f"Request deleted: {request_id}")
    return {"message": "Request deleted successfully"}
