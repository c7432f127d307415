"""
Data models for the query engine
"""
from .item import Item
from .requests import QueryRequest
from .responses import (
    Mode,
    ItemType,
    ResultKind,
    RoutingDecision,
    EvaluationResult,
    ResultItem,
    QueryResponse
)

__all__ = [
    # Request
    "QueryRequest",
    "Item",
    # Routing
    "Mode",
    "RoutingDecision",
    # Results
    "ItemType",
    "ResultKind",
    "EvaluationResult",
    "ResultItem",
    "QueryResponse",
]
