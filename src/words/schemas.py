from pydantic import BaseModel, Field


class PickResponse(BaseModel):
    """Schema for the words picked from one random article."""
    language: str = Field(..., description="Language code the words were picked for (e.g. 'en')")
    words: list[str] = Field(default_factory=list, description="Words never served before for this language")


class HealthResponse(BaseModel):
    status: str


class LanguagesResponse(BaseModel):
    """Schema listing the configured article sources."""
    languages: dict[str, str] = Field(..., description="Language code -> random article URL")
