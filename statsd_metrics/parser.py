"""Parser for StatsD metric lines.

Handles counters, gauges, samples and sets as described in
https://github.com/etsy/statsd/blob/master/docs/metric_types.md::

    gorets:1|c
    glork:320|ms|@0.1
    gaugor:333|g
    uniques:765|s

Each line is a single forward scan: name up to ':', value up to '|', an
alphanumeric type token, then an optional '|@<rate>' suffix. Parsing is pure;
nothing here logs or keeps state between calls.
"""
import re
from typing import List, Optional, Tuple, Union

from .errors import EmptyInput, MalformedInput
from .models import Metric, MetricType, TYPE_CODES

NAME_DELIMITER = ":"
VALUE_DELIMITER = "|"
SAMPLE_RATE_PREFIX = "|@"
LINE_TERMINATOR = "\n"
DEFAULT_ENCODING = "utf-8"

MetricInput = Union[bytes, bytearray, memoryview, str]

_TYPE_TOKEN_RE = re.compile(r"[A-Za-z0-9]+")
_SAMPLE_RATE_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan)\Z",
    re.IGNORECASE | re.ASCII,
)


def classify_token(token: str) -> Tuple[MetricType, Optional[str]]:
    """Map a type token to its metric type and unit.

    The reserved codes (c, g, s) are matched exactly and case-sensitively;
    anything else is a sample whose unit is the token itself.
    """
    metric_type = TYPE_CODES.get(token)
    if metric_type is None:
        return MetricType.SAMPLE, token
    return metric_type, None


def split_lines(payload: MetricInput, encoding: str = DEFAULT_ENCODING) -> List[Union[bytes, str]]:
    """Split a batch payload into lines.

    A single trailing terminator is dropped; blank lines elsewhere are kept so
    the caller sees them as malformed. Raises EmptyInput when no line remains.

    Byte payloads stay bytes (so each line is decoded on its own) when the
    encoding writes "\n" as the single byte 0x0A. Otherwise (UTF-16, UTF-32)
    the payload is decoded as a whole first and split as text.
    """
    terminator = LINE_TERMINATOR
    if not isinstance(payload, str):
        payload = bytes(payload)
        if LINE_TERMINATOR.encode(encoding) == LINE_TERMINATOR.encode():
            terminator = LINE_TERMINATOR.encode()
        else:
            payload = _decode(payload, encoding, first_line=1)

    if payload.endswith(terminator):
        payload = payload[:-len(terminator)]
    if not payload:
        raise EmptyInput("No metric lines in payload")

    return payload.split(terminator)


def parse_metric(data: MetricInput, encoding: str = DEFAULT_ENCODING,
                 line_number: Optional[int] = None) -> Metric:
    """Parse exactly one metric line.

    Args:
        data: The line, as bytes or text. One trailing newline is allowed.
        encoding: Encoding used to decode byte input
        line_number: Line number reported in errors (for batch callers)

    Returns:
        The parsed Metric

    Raises:
        MalformedInput: If the line does not match the grammar
    """
    line = _decode(data, encoding, first_line=line_number)
    if line.endswith(LINE_TERMINATOR):
        line = line[:-len(LINE_TERMINATOR)]
    return _parse_line(line, line_number)


def parse_batch(data: MetricInput, encoding: str = DEFAULT_ENCODING) -> List[Metric]:
    """Parse a newline-delimited payload into metrics, in input order.

    The whole payload fails on the first bad line; there is no skipping.

    Raises:
        EmptyInput: If the payload holds no lines
        MalformedInput: If any line does not match the grammar
    """
    return [
        parse_metric(line, encoding, line_number=number)
        for number, line in enumerate(split_lines(data, encoding), start=1)
    ]


def _decode(data: MetricInput, encoding: str, first_line: Optional[int] = None) -> str:
    if isinstance(data, str):
        return data
    data = bytes(data)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        # Report the character offset within the line holding the bad byte
        prefix = data[:e.start].decode(encoding, errors="replace")
        line_start = prefix.rfind(LINE_TERMINATOR) + 1
        line = None if first_line is None else first_line + prefix.count(LINE_TERMINATOR)
        raise MalformedInput(
            f"Invalid {encoding} byte sequence", line=line, position=len(prefix) - line_start
        ) from e


def _parse_line(line: str, line_number: Optional[int]) -> Metric:
    if not line:
        raise MalformedInput("Empty metric line", line=line_number, position=0)

    # name := 1*(any except ':')
    name_end = line.find(NAME_DELIMITER)
    if name_end == -1:
        raise MalformedInput("Missing ':' after metric name", line=line_number, position=len(line))
    if name_end == 0:
        raise MalformedInput("Empty metric name", line=line_number, position=0)

    # value := 1*(any except '|')
    value_start = name_end + 1
    value_end = line.find(VALUE_DELIMITER, value_start)
    if value_end == -1:
        raise MalformedInput("Missing '|' after metric value", line=line_number, position=len(line))
    if value_end == value_start:
        raise MalformedInput("Empty metric value", line=line_number, position=value_start)

    token_start = value_end + 1
    token = _TYPE_TOKEN_RE.match(line, token_start)
    if token is None:
        raise MalformedInput("Expected alphanumeric metric type or unit", line=line_number, position=token_start)
    metric_type, unit = classify_token(token.group())

    sample_rate, end = _parse_sample_rate(line, token.end(), line_number)
    if end != len(line):
        raise MalformedInput(f"Unexpected trailing characters {line[end:]!r}", line=line_number, position=end)

    return Metric(
        name=line[:name_end],
        value=line[value_start:value_end],
        metric_type=metric_type,
        unit=unit,
        sample_rate=sample_rate,
    )


def _parse_sample_rate(line: str, start: int, line_number: Optional[int]) -> Tuple[Optional[float], int]:
    """Parse an optional '|@<rate>' suffix, returning (rate, end offset)"""
    if not line.startswith(SAMPLE_RATE_PREFIX, start):
        return None, start

    literal_start = start + len(SAMPLE_RATE_PREFIX)
    literal_end = line.find(LINE_TERMINATOR, literal_start)
    if literal_end == -1:
        literal_end = len(line)

    literal = line[literal_start:literal_end]
    if not _SAMPLE_RATE_RE.match(literal):
        raise MalformedInput(f"Invalid sample rate {literal!r}", line=line_number, position=literal_start)
    return float(literal), literal_end
