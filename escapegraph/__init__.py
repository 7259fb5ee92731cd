"""Escape feasibility for disc agents among point obstacles."""
from .cases import EscapeCase, EscapeQuery, InputFormatError, read_cases
from .config import EscapeConfig
from .planner import EscapePlanner

__all__ = ['EscapeCase', 'EscapeConfig', 'EscapePlanner', 'EscapeQuery', 'InputFormatError', 'read_cases']
