"""
Book routes
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request, Response

from bookshelf.exceptions import BadRequestError
from bookshelf.services.book_service import BookService
from bookshelf.services.open_library import OpenLibraryClient
from .dependencies import get_book_service, get_search_client, parse_int

book_router = APIRouter(prefix="/books", tags=["books"])


@book_router.get("")
async def list_books(
    series_id: Optional[str] = None,
    status: Optional[str] = None,
    publication_year: Optional[str] = None,
    service: BookService = Depends(get_book_service),
):
    """List books, filtered by series_id, status and publication_year"""
    filters: Dict[str, Any] = {}
    # An unparseable numeric filter matches no book
    for name, raw in (("series_id", series_id), ("publication_year", publication_year)):
        if raw:
            value = parse_int(raw)
            if value is None:
                return []
            filters[name] = value
    if status:
        filters["status"] = status

    books = await service.list_books(**filters)
    return [book.to_dict() for book in books]


@book_router.post("", status_code=201)
async def create_book(
    payload: Dict[str, Any] = Body(...),
    service: BookService = Depends(get_book_service),
):
    book = await service.create_book(payload)
    return book.to_dict()


@book_router.get("/search")
async def search_books(
    request: Request,
    q: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    client: OpenLibraryClient = Depends(get_search_client),
):
    """Search Open Library; supports inline author:/title:/isbn:/publisher:/year: filters"""
    if not q:
        raise BadRequestError({"q": ["Search query is required"]})

    settings = request.app.state.settings
    parsed_limit = parse_int(limit)
    parsed_offset = parse_int(offset)
    return await client.search(
        q,
        limit=settings.SEARCH_DEFAULT_LIMIT if parsed_limit is None else parsed_limit,
        offset=max(0, parsed_offset or 0),
    )


@book_router.get("/{book_id}")
async def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    book = await service.get_book(parse_int(book_id))
    return book.to_dict()


@book_router.put("/{book_id}")
@book_router.patch("/{book_id}")
async def update_book(
    book_id: str,
    payload: Dict[str, Any] = Body(...),
    service: BookService = Depends(get_book_service),
):
    """Partial update, the id in the path always wins"""
    book = await service.update_book(parse_int(book_id), payload)
    return book.to_dict()


@book_router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
    await service.delete_book(parse_int(book_id))
    return Response(status_code=204)
