# app/api/books.py

from fastapi import APIRouter

from app.models.books import Book, BookList

router = APIRouter(prefix="/api/books", tags=["books"])

BOOKS = (
    Book(id=1, name="Witcher"),
    Book(id=2, name="Lord of the Rings"),
    Book(id=3, name="Diune"),
)


@router.get("", response_model=BookList, summary="Retrieve the sample book list")
def list_books() -> BookList:
    """
    A fixed list; it never touches storage.
    """
    return BookList(data=list(BOOKS))
