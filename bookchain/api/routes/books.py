"""Book registration routes."""

from fastapi import APIRouter, Depends

from bookchain.api.dependencies.chain import get_book_registry_service
from bookchain.api.models.book import BookRequest, BookResponse
from bookchain.application.services.book_registry_service import BookRegistryService

router = APIRouter(prefix="/v1/books", tags=["books"])


@router.post("", response_model=BookResponse)
async def register_book(
    request_data: BookRequest,
    service: BookRegistryService = Depends(get_book_registry_service),
) -> BookResponse:
    """Register a book and return it with its derived id."""
    return BookResponse.from_domain(service.register(request_data.to_domain()))
