"""StatsD metric line parsing"""
from .errors import ParseError, MalformedInput, EmptyInput
from .models import Metric, MetricType, TYPE_CODES
from .parser import parse_metric, parse_batch, classify_token, split_lines

__all__ = [
    'ParseError',
    'MalformedInput',
    'EmptyInput',
    'Metric',
    'MetricType',
    'TYPE_CODES',
    'parse_metric',
    'parse_batch',
    'classify_token',
    'split_lines',
]
