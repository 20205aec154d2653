"""
Project value object.
"""

from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Project(BaseModel):
    """One advertised project as served by the feed endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str
    url: str
    description: str
    logo_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("logo_url", "logoURL")
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
