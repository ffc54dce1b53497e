"""
Pydantic models for catalog records.
Field names are Pythonic; aliases keep the keys used by the source document.
"""

from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, Field, validator


class Work(BaseModel):
    """
    A published edition of a work.
    Only the edition year is interpreted; other keys pass through untouched.
    """
    edition_year: Union[int, str] = Field(..., alias="edicion", description="Year of the edition")

    @validator('edition_year', pre=True)
    def validate_edition_year(cls, v):
        """Booleans are ints to Python but never years."""
        if isinstance(v, bool):
            raise ValueError('edicion must be a year, not a boolean')
        return v

    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to the source document's shape."""
        return self.model_dump(by_alias=True, mode="json")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        extra = "allow"
        frozen = True
        json_schema_extra = {
            "example": {
                "titulo": "Los tres mosqueteros",
                "edicion": 1844
            }
        }


class Author(BaseModel):
    """An author and the ordered list of their works."""
    name: str = Field(..., alias="autor_nombre", description="Author first name")
    surname: str = Field(..., alias="autor_apellido", description="Author surname")
    works: Tuple[Work, ...] = Field(default_factory=tuple, alias="obras", description="Published works")

    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to the source document's shape."""
        return self.model_dump(by_alias=True, mode="json")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        extra = "allow"
        frozen = True
        json_schema_extra = {
            "example": {
                "autor_nombre": "Alexandre",
                "autor_apellido": "Dumas",
                "obras": [
                    {"titulo": "Los tres mosqueteros", "edicion": 1844}
                ]
            }
        }
