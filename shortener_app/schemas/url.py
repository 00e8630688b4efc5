from typing import Optional

from pydantic import BaseModel, Field, computed_field, ConfigDict, field_validator
from shortener_app.config import settings


class URLCreate(BaseModel):
    """Request body for POST /shorten. The URL is stored as given, unvalidated."""
    original: Optional[str] = Field("", description="The original URL to be shortened")

    model_config = ConfigDict(strict=True)

    @field_validator("original")
    @classmethod
    def null_as_empty(cls, value: Optional[str]) -> str:
        """A JSON null leaves the field at its zero value, like a missing key"""
        return "" if value is None else value


class URLPair(BaseModel):
    original: str
    short_code: str


class ShortenResponse(BaseModel):
    short_code: str

    @computed_field
    @property
    def short_url(self) -> str:
        """Computed field - base URL and short_code concatenated"""
        return f"{settings.base_url}/{self.short_code}"
