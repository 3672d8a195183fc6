# Hypermedia link models
# Relation descriptors as advertised in resource payloads

from pydantic import BaseModel, Field, field_validator


class LinkDescriptor(BaseModel):
    """A single relation advertised by a resource payload."""

    rel: str = Field(..., min_length=1, description="Relation name")
    href: str = Field(..., min_length=1, description="Absolute or base-relative URL")
    method: str = Field(default="GET", description="HTTP method for the relation")

    @field_validator("method")
    @classmethod
    def normalize_method(cls, v: str) -> str:
        """Store methods upper-cased."""
        return v.upper()
