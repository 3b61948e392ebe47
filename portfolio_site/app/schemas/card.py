"""
Pydantic models for portfolio cards.

A card is one portfolio entry shown to visitors.  ``CardBase`` holds
the editable fields; ``CardCreate`` is the payload accepted when a card
is created (no ``id`` or ``createdAt``), and ``Card`` is the full
record as stored in the cards file and returned by the API.

Field names on the wire are camelCase (``shortDescription``,
``imagePath``...).  Python code uses the snake_case attribute names;
both spellings are accepted on input.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Category(str, Enum):
    """Closed set of card categories."""

    HOME = "Home"
    SOFTWARE = "Software"
    GAMES = "Games"


class CardBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Photon Fury"])
    description: str = Field(..., min_length=1, examples=["A 2D shooting game published on itch.io"])
    short_description: Optional[str] = Field(None, alias="shortDescription")
    category: Category = Field(..., examples=["Games"])
    image_path: Optional[str] = Field(None, alias="imagePath", examples=["/uploads/1718000000000-cover.png"])
    product_link: Optional[str] = Field(None, alias="productLink")
    video_link: Optional[str] = Field(None, alias="videoLink")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("short_description", "image_path", "product_link", "video_link", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # The admin form posts empty inputs as "".
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CardCreate(CardBase):
    """Schema for creating a card."""
    pass


class Card(CardBase):
    """A stored card, including its identity and creation time."""

    id: str = Field(..., min_length=1)
    created_at: int = Field(..., alias="createdAt", examples=[1718000000000])


class CardDelete(BaseModel):
    """Body of ``DELETE /cards``."""

    id: str
