"""
Pydantic model for the admin‑editable site settings.

There is a single settings object, replaced wholesale on update.  It
currently carries one value: how many of the most recently created
cards appear in the highlight section.
"""

from pydantic import BaseModel, Field

DEFAULT_NUMBER_OF_HIGHLIGHTS = 1


class SiteSettings(BaseModel):
    number_of_highlights: int = Field(
        DEFAULT_NUMBER_OF_HIGHLIGHTS,
        ge=0,
        alias="numberOfHighlights",
        description="Number of most recently created cards shown as highlights",
    )

    model_config = {
        "populate_by_name": True,
    }
