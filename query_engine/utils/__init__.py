"""
Utility modules for the query engine
"""
from .formatting import format_exact, format_number
from .validators import within_length_bound

__all__ = [
    "format_exact",
    "format_number",
    "within_length_bound",
]
