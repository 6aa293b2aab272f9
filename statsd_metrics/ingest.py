"""Payload ingestion on top of the line parser"""
from dataclasses import dataclass, field
from typing import List

from .errors import MalformedInput, ParseError
from .models import Metric
from .parser import DEFAULT_ENCODING, MetricInput, parse_batch, parse_metric, split_lines
from logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class IngestResult:
    """Metrics accepted from a payload and the errors for what was rejected"""
    metrics: List[Metric] = field(default_factory=list)
    rejected: List[ParseError] = field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.metrics)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)

    @property
    def ok(self) -> bool:
        return not self.rejected


class PayloadIngestor:
    """Turns raw payloads into metrics.

    In strict mode a payload is all-or-nothing, exactly like parse_batch.
    In lenient mode the payload is split and every line parsed on its own,
    so one corrupt line only costs that line.
    """

    def __init__(self, config=None):
        self.config = config
        self.encoding = config.encoding if config else DEFAULT_ENCODING
        self.strict = config.strict if config else True

    def ingest(self, payload: MetricInput) -> IngestResult:
        if self.strict:
            return self._ingest_batch(payload)
        return self._ingest_lines(payload)

    def _ingest_batch(self, payload: MetricInput) -> IngestResult:
        try:
            metrics = parse_batch(payload, self.encoding)
        except ParseError as e:
            logger.warning(
                "Payload rejected",
                error=e.message,
                error_type=type(e).__name__,
                line=e.line,
                position=e.position,
                event_type="payload_rejected"
            )
            return IngestResult(rejected=[e])

        logger.debug("Payload parsed", metrics_count=len(metrics), event_type="payload_parsed")
        return IngestResult(metrics=metrics)

    def _ingest_lines(self, payload: MetricInput) -> IngestResult:
        result = IngestResult()

        try:
            lines = split_lines(payload, self.encoding)
        except ParseError as e:
            logger.warning("Payload rejected", error=e.message, error_type=type(e).__name__, event_type="payload_rejected")
            result.rejected.append(e)
            return result

        for number, line in enumerate(lines, start=1):
            try:
                result.metrics.append(parse_metric(line, self.encoding, line_number=number))
            except MalformedInput as e:
                logger.warning(
                    "Metric line rejected",
                    error=e.message,
                    line=number,
                    position=e.position,
                    event_type="line_rejected"
                )
                result.rejected.append(e)

        logger.debug(
            "Payload parsed",
            metrics_count=result.accepted_count,
            rejected_count=result.rejected_count,
            event_type="payload_parsed"
        )
        return result
