"""
Router builder for the per-entity create/read/update/delete endpoints.

Every entity exposes the same five routes under ``/{storage_key}``; only the
schemas and the service dependency differ.
"""

from typing import Any, Callable, List, Type

from fastapi import APIRouter, Body, Depends, Request, status

from ...application.services import EntityService
from ...domain.value_objects.entity_id import EntityId
from ..errors import EntityNotFoundError
from ..schemas.common import ApiResponse, DeleteResult
from ..utils.responses import ok


def build_entity_router(
    storage_key: str,
    tag: str,
    in_schema: Type[Any],
    out_schema: Type[Any],
    get_service: Callable[..., EntityService],
    include_create: bool = True,
) -> APIRouter:
    """Build the CRUD router for one entity type."""
    router = APIRouter(prefix=f"/{storage_key}", tags=[tag])

    if include_create:
        @router.post(
            "",
            response_model=ApiResponse[out_schema],
            status_code=status.HTTP_201_CREATED,
            summary=f"Create {storage_key}",
        )
        async def create_entity(
            request: Request,
            payload: in_schema = Body(...),
            service: EntityService = Depends(get_service),
        ):
            created = await service.create(payload.to_domain())
            return ok(request, data=out_schema.from_domain(created), message=f"{tag} created")

    @router.get(
        "",
        response_model=ApiResponse[List[out_schema]],
        summary=f"List {storage_key} records",
    )
    async def list_entities(
        request: Request,
        service: EntityService = Depends(get_service),
    ):
        entities = await service.list()
        return ok(request, data=[out_schema.from_domain(e) for e in entities])

    @router.get(
        "/{entity_id}",
        response_model=ApiResponse[out_schema],
        summary=f"Get {storage_key} by ID",
    )
    async def get_entity(
        request: Request,
        entity_id: str,
        service: EntityService = Depends(get_service),
    ):
        entity = await service.get(EntityId(entity_id))
        if entity is None:
            raise EntityNotFoundError(storage_key, entity_id)
        return ok(request, data=out_schema.from_domain(entity))

    @router.put(
        "/{entity_id}",
        response_model=ApiResponse[out_schema],
        summary=f"Replace {storage_key} fields",
    )
    async def update_entity(
        request: Request,
        entity_id: str,
        payload: in_schema = Body(...),
        service: EntityService = Depends(get_service),
    ):
        updated = await service.update(EntityId(entity_id), payload.to_domain())
        if updated is None:
            raise EntityNotFoundError(storage_key, entity_id)
        return ok(request, data=out_schema.from_domain(updated), message=f"{tag} updated")

    @router.delete(
        "/{entity_id}",
        response_model=ApiResponse[DeleteResult],
        summary=f"Delete {storage_key} by ID",
    )
    async def delete_entity(
        request: Request,
        entity_id: str,
        service: EntityService = Depends(get_service),
    ):
        if not await service.delete(EntityId(entity_id)):
            raise EntityNotFoundError(storage_key, entity_id)
        return ok(request, data=DeleteResult(deleted=True, id=entity_id), message=f"{tag} deleted")

    return router
