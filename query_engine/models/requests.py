"""
Request models for the query engine
"""
from pydantic import BaseModel, Field
from typing import List

from .item import Item


class QueryRequest(BaseModel):
    """One line of launcher input plus the candidates to rank in Apps mode"""

    query: str = Field(default="", description="Raw search-box contents")
    items: List[Item] = Field(
        default_factory=list,
        description="Candidate items ranked when the query routes to Apps"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "query": "fire",
                "items": [
                    {"name": "Firefox", "description": "Web Browser", "keywords": ["www"]}
                ]
            }
        }
