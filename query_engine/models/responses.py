"""
Response models for the query engine
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum

from .item import Item


class Mode(str, Enum):
    """Interaction context a query is routed to"""
    APPS = "apps"
    WINDOWS = "windows"
    PROCESSES = "processes"
    WIFI = "wifi"
    BLUETOOTH = "bluetooth"
    AUDIO = "audio"
    CLIPBOARD = "clipboard"
    NOTES = "notes"
    SNIPPETS = "snippets"
    TODOS = "todos"
    SSH = "ssh"
    DOCKER = "docker"
    TIMER = "timer"
    EMOJI = "emoji"
    FILES = "files"
    RECENT_FILES = "recent_files"
    BITWARDEN = "bitwarden"
    AI = "ai"
    WEB_SEARCH = "web_search"
    CALCULATOR = "calculator"
    CONVERTER = "converter"


class ItemType(str, Enum):
    """Types of result items produced by the pipeline"""
    CALCULATOR = "calculator"
    CONVERTER = "converter"
    WEB_SEARCH = "web_search"


class ResultKind(str, Enum):
    """Outcome of evaluating a calculator or converter query"""
    NUMBER = "number"
    CONVERTED = "converted"
    NO_MATCH = "no_match"


class RoutingDecision(BaseModel):
    """Mode selected for a query and the residual handed to that mode"""

    mode: Mode = Field(..., description="Active mode for this query")
    residual: str = Field(
        default="",
        description="Query text left after the routing prefix is stripped"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "mode": "wifi",
                "residual": "home"
            }
        }


class EvaluationResult(BaseModel):
    """Literal result of a calculator or converter query"""

    kind: ResultKind
    value: Optional[float] = Field(
        default=None,
        description="Calculator value, or the source value of a conversion"
    )
    from_unit: Optional[str] = None
    to_unit: Optional[str] = None
    result: Optional[float] = Field(
        default=None,
        description="Converted value (converter only)"
    )

    class Config:
        frozen = True

    @classmethod
    def number(cls, value: float) -> "EvaluationResult":
        return cls(kind=ResultKind.NUMBER, value=value)

    @classmethod
    def converted(
        cls,
        value: float,
        from_unit: str,
        to_unit: str,
        result: float
    ) -> "EvaluationResult":
        return cls(
            kind=ResultKind.CONVERTED,
            value=value,
            from_unit=from_unit,
            to_unit=to_unit,
            result=result
        )

    @classmethod
    def no_match(cls) -> "EvaluationResult":
        return cls(kind=ResultKind.NO_MATCH)

    @property
    def matched(self) -> bool:
        return self.kind != ResultKind.NO_MATCH


class ResultItem(BaseModel):
    """Literal result row shown to the user"""

    id: str = Field(..., description="Stable identifier, e.g. calc:42")
    name: str = Field(..., description="Primary display text")
    description: Optional[str] = None
    item_type: ItemType
    icon: Optional[str] = None
    content: Optional[str] = Field(
        default=None,
        description="Value copied to the clipboard on confirmation"
    )
    search_engine: Optional[str] = None
    search_terms: Optional[str] = None
    url: Optional[str] = None


class QueryResponse(BaseModel):
    """Complete outcome of interpreting one line of input"""

    query: str
    routing: RoutingDecision
    evaluation: Optional[EvaluationResult] = Field(
        default=None,
        description="Set for calculator and converter queries"
    )
    results: List[ResultItem] = Field(default_factory=list)
    ranked_items: List[Item] = Field(
        default_factory=list,
        description="Candidate items ranked for Apps mode"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "query": "2+3*4",
                "routing": {"mode": "calculator", "residual": "2+3*4"},
                "evaluation": {"kind": "number", "value": 14.0},
                "results": [
                    {
                        "id": "calc:14",
                        "name": "2+3*4 = 14",
                        "description": "Press Enter to copy result",
                        "item_type": "calculator",
                        "icon": "accessories-calculator",
                        "content": "14"
                    }
                ],
                "ranked_items": []
            }
        }
