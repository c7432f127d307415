"""
Query Pipeline
Turns one line of launcher input into a routing decision plus any computed results

Steps:
1. Mode classification
2. Calculator / converter evaluation (falls through to Apps on no result)
3. Web-search rows or Apps ranking
"""
import logging
from typing import Iterable, Optional

from ..models.item import Item
from ..models.requests import QueryRequest
from ..models.responses import Mode, QueryResponse, RoutingDecision
from .calculator import calculator_items, evaluate_result
from .converter import converter_items, resolve_result
from .fuzzy_ranking import rank_items
from .mode_classifier import classify
from .web_search import web_search_items

logger = logging.getLogger(__name__)


def process_query(query: str, items: Optional[Iterable[Item]] = None) -> QueryResponse:
    """
    Interpret one line of input

    Calculator and converter queries that produce no result are re-routed to
    Apps so the text still works as a plain search term.

    Args:
        query: Raw search-box contents
        items: Candidate items ranked when the query routes to Apps

    Returns:
        QueryResponse with routing, evaluation and result rows
    """
    candidates = list(items) if items is not None else []
    routing = classify(query)
    response = QueryResponse(query=query, routing=routing)

    if routing.mode == Mode.CALCULATOR:
        evaluation = evaluate_result(routing.residual)
        if evaluation.matched:
            response.evaluation = evaluation
            response.results = calculator_items(routing.residual)
            logger.info(f"Calculator result for {query!r}: {evaluation.value}")
            return response
        routing = _fall_through(routing)

    elif routing.mode == Mode.CONVERTER:
        evaluation = resolve_result(routing.residual)
        if evaluation.matched:
            response.evaluation = evaluation
            response.results = converter_items(routing.residual)
            logger.info(
                f"Converted {evaluation.value} {evaluation.from_unit} -> "
                f"{evaluation.result} {evaluation.to_unit}"
            )
            return response
        routing = _fall_through(routing)

    elif routing.mode == Mode.WEB_SEARCH:
        response.results = web_search_items(routing.residual)
        return response

    if routing.mode == Mode.APPS:
        response.routing = routing
        response.ranked_items = rank_items(candidates, routing.residual)
        logger.info(f"Apps search {routing.residual!r}: {len(response.ranked_items)} matches")

    return response


def process_request(request: QueryRequest) -> QueryResponse:
    """Interpret a QueryRequest"""
    return process_query(request.query, request.items)


def _fall_through(routing: RoutingDecision) -> RoutingDecision:
    logger.debug(f"No {routing.mode.value} result; falling through to apps")
    return RoutingDecision(mode=Mode.APPS, residual=routing.residual)
