"""
Series routes
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response

from bookshelf.services.series_service import SeriesService
from .dependencies import get_series_service, parse_int

series_router = APIRouter(prefix="/series", tags=["series"])


@series_router.get("")
async def list_series(service: SeriesService = Depends(get_series_service)):
    return [series.to_dict() for series in await service.list_series()]


@series_router.post("", status_code=201)
async def create_series(
    payload: Dict[str, Any] = Body(...),
    service: SeriesService = Depends(get_series_service),
):
    series = await service.create_series(payload)
    return series.to_dict()


@series_router.get("/{series_id}")
async def get_series(series_id: str, service: SeriesService = Depends(get_series_service)):
    series = await service.get_series(parse_int(series_id))
    return series.to_dict()


@series_router.put("/{series_id}")
@series_router.patch("/{series_id}")
async def update_series(
    series_id: str,
    payload: Dict[str, Any] = Body(...),
    service: SeriesService = Depends(get_series_service),
):
    series = await service.update_series(parse_int(series_id), payload)
    return series.to_dict()


@series_router.delete("/{series_id}", status_code=204)
async def delete_series(series_id: str, service: SeriesService = Depends(get_series_service)):
    """Delete a series; its books stay but lose their series_id"""
    await service.delete_series(parse_int(series_id))
    return Response(status_code=204)


@series_router.get("/{series_id}/books")
async def list_series_books(series_id: str, service: SeriesService = Depends(get_series_service)):
    books = await service.list_books_in_series(parse_int(series_id))
    return [book.to_dict() for book in books]
