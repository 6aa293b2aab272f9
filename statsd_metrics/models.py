"""StatsD metric data models"""
import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum


class MetricType(Enum):
    """StatsD metric types"""
    COUNTER = "counter"
    GAUGE = "gauge"
    SAMPLE = "sample"
    SET = "set"

    @property
    def code(self) -> Optional[str]:
        """Reserved wire code, None for samples (they carry a unit instead)"""
        for code, metric_type in TYPE_CODES.items():
            if metric_type is self:
                return code
        return None


# Type tokens with a fixed meaning; any other token is a sample unit
TYPE_CODES: Dict[str, MetricType] = {
    "c": MetricType.COUNTER,
    "g": MetricType.GAUGE,
    "s": MetricType.SET,
}


@dataclass(frozen=True)
class Metric:
    """A single metric as emitted by a StatsD client.

    Attributes:
        name: Bucket name, everything before the first ':'
        value: Raw value text. Left unparsed since its meaning depends on
            the type (counter increment, signed gauge delta, set member...)
        metric_type: Counter, gauge, sample or set
        unit: Unit of a sample (e.g. "ms"), None for every other type
        sample_rate: Fraction of events the client actually sent, if given.
            Any float literal is accepted, so this may be inf or nan; a nan
            rate never compares equal, even to a re-parse of the same line.
    """
    name: str
    value: str
    metric_type: MetricType
    unit: Optional[str] = None
    sample_rate: Optional[float] = None

    def __post_init__(self):
        if not self.name or ":" in self.name:
            raise ValueError(f"Invalid metric name: {self.name!r}")

        if not self.value or "|" in self.value:
            raise ValueError(f"Invalid metric value: {self.value!r}")

        if self.metric_type is MetricType.SAMPLE:
            if not self.unit or not (self.unit.isascii() and self.unit.isalnum()) or self.unit in TYPE_CODES:
                raise ValueError(f"Invalid sample unit: {self.unit!r}")
        elif self.unit is not None:
            raise ValueError(f"{self.metric_type.value} metrics have no unit, got {self.unit!r}")

    @property
    def type_token(self) -> str:
        """Token written after the value delimiter"""
        if self.metric_type is MetricType.SAMPLE:
            return self.unit
        return self.metric_type.code

    def to_line(self) -> str:
        """Render in canonical StatsD line form (without terminator)"""
        line = f"{self.name}:{self.value}|{self.type_token}"
        if self.sample_rate is not None:
            line += f"|@{self.sample_rate!r}"
        return line

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "type": self.metric_type.value,
            "unit": self.unit,
            "sample_rate": self.sample_rate,
        }

    def to_json(self) -> str:
        """JSON form; inf and nan rates are written as strings to stay valid JSON"""
        record = self.to_dict()
        if self.sample_rate is not None and not math.isfinite(self.sample_rate):
            record["sample_rate"] = repr(self.sample_rate)
        return json.dumps(record, allow_nan=False)
