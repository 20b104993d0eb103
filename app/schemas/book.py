from pydantic import BaseModel, field_validator


class BookPayload(BaseModel):
    """Body of create and update requests.

    Every field is optional here: update replaces all four columns, so a field
    left out becomes null and the store's NOT NULL constraints decide. Text
    columns take any JSON scalar and store its string form.
    """

    title: str | int | float | None = None
    author: str | int | float | None = None
    isbn: str | int | float | None = None
    published_year: int | None = None

    @field_validator("title", "author", "isbn")
    @classmethod
    def _as_text(cls, value):
        return None if value is None else str(value)


class BookResponse(BaseModel):
    id: int
    title: str
    author: str
    isbn: str
    published_year: int | None = None

    model_config = {"from_attributes": True}
