"""
Pydantic schemas for book records.

A book is identified by a client-assigned string ``id``.  ``quantity``
counts the copies currently available for checkout.  Every field is
optional on create and falls back to its zero value.
"""

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    id: str = Field("", description="Client-assigned identifier")
    title: str = Field("", description="Book title")
    author: str = Field("", description="Book author")
    quantity: int = Field(0, description="Number of copies available for checkout")


class BookCreate(BookBase):
    """Schema for creating a book.

    Fields are validated strictly: ``"3"`` or ``true`` is not accepted
    as a quantity and a number is not accepted as an id.
    """

    model_config = {
        "strict": True,
    }


class Book(BookBase):
    """A stored book record, also used as the response body."""

    model_config = {
        "from_attributes": True,
    }


class Message(BaseModel):
    """Body returned for every error response."""

    message: str
