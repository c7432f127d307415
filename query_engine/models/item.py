"""
Candidate item model consumed by the fuzzy ranking engine
"""
from pydantic import BaseModel, Field
from typing import Optional, List


class Item(BaseModel):
    """Read-only view of a searchable launcher entry"""

    id: Optional[str] = None
    name: str = Field(..., description="Display name, the primary match field")
    description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "firefox.desktop",
                "name": "Firefox",
                "description": "Web Browser",
                "keywords": ["internet", "www"]
            }
        }

    def matches(self, query: str) -> bool:
        """
        Case-insensitive substring test over name, description and keywords

        Args:
            query: Search fragment

        Returns:
            True if any field contains the fragment
        """
        query = query.lower()

        if query in self.name.lower():
            return True

        if self.description and query in self.description.lower():
            return True

        return any(query in keyword.lower() for keyword in self.keywords)
