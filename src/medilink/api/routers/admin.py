"""
Admin endpoints.
"""

from fastapi import APIRouter, Depends, Request, status

from ...application.services import AdminService
from ..deps import get_admin_service
from ..schemas.common import ApiResponse
from ..schemas.users import AdminIn, AdminOut
from ..utils.responses import ok
from .crud import build_entity_router

router = APIRouter()


@router.post(
    "/admin",
    response_model=ApiResponse[AdminOut],
    status_code=status.HTTP_201_CREATED,
    tags=["Admins"],
    summary="Create admin",
    description="Stores a fully populated admin and returns it with its store-assigned ID.",
)
async def create_admin(
    request: Request,
    payload: AdminIn,
    service: AdminService = Depends(get_admin_service),
):
    admin = await service.create_admin(payload.to_domain())
    return ok(request, data=AdminOut.from_domain(admin), message="Admin created")


router.include_router(
    build_entity_router(
        "admin", "Admins", AdminIn, AdminOut, get_admin_service, include_create=False
    )
)
