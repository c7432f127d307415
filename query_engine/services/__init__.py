"""
Core service modules for the query engine
"""
from .mode_classifier import classify
from .calculator import evaluate, calculator_items
from .converter import resolve, convert, converter_items
from .fuzzy_ranking import score, rank_items
from .web_search import parse_search_query, build_search_url, web_search_items
from .pipeline import process_query, process_request

__all__ = [
    "classify",
    "evaluate",
    "calculator_items",
    "resolve",
    "convert",
    "converter_items",
    "score",
    "rank_items",
    "parse_search_query",
    "build_search_url",
    "web_search_items",
    "process_query",
    "process_request",
]
