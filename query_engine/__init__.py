"""
Query Engine
Interprets one line of launcher input: mode routing, calculator, unit converter and fuzzy ranking
"""
__version__ = "1.0.0"
