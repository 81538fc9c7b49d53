# app/models/books.py

from typing import List

from pydantic import BaseModel


class Book(BaseModel):
    id: int
    name: str


class BookList(BaseModel):
    data: List[Book]
