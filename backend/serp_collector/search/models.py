"""Search record models."""

from pydantic import BaseModel, ConfigDict, Field


class SearchRecord(BaseModel):
    """One anchor extracted from a search results page."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Flattened anchor text")
    link: str = Field(default="", description="Anchor href, possibly relative or empty")
    location: str = Field(default="", description="Text of the nested location element")
    keyword: str = Field(..., description="Search term that produced the page")
    html: str = Field(..., description="Flattened anchor text (same as title)")
    search_term: str = Field(..., alias="searchTerm", description="Search term that produced the page")

    def to_document(self) -> dict[str, str]:
        """Return the MongoDB document shape."""
        return self.model_dump(by_alias=True)
