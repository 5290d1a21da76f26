"""Parsers for the receiver-mock response bodies

/metrics-list returns one ``<metric-name>:<count>`` record per line, see
https://github.com/SumoLogic/sumologic-kubernetes-tools/tree/main/src/rust/receiver-mock#statistics

/metrics-samples returns a JSON list of objects with ``metric``, ``value``,
``labels`` and ``timestamp`` keys. Keys the receiver leaves out decode to
their zero value.
"""
import json
import math
import re
from typing import Any, Dict, List, Mapping

from .errors import MetricsListParseError, MetricsSamplesDecodeError
from .models import MetricCounts, MetricSample

_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")

# counts are signed 64-bit, timestamps unsigned 64-bit on the receiver side
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1

_SAMPLE_FIELDS = ("metric", "value", "labels", "timestamp")


def parse_metric_list(raw_metrics_values: str) -> MetricCounts:
    """Parse the body of /metrics-list into a name -> count mapping"""
    metric_counts: MetricCounts = {}
    for line in raw_metrics_values.split("\n"):
        if not line:
            continue
        # metric names may contain colons, the last one is the separator
        split_index = line.rfind(":")
        if split_index <= 0:
            raise MetricsListParseError(line)
        metric_name = line[:split_index]
        count_string = line[split_index + 1:].strip()
        if not _COUNT_PATTERN.fullmatch(count_string):
            raise MetricsListParseError(line, reason=f"invalid metric count {count_string!r}")
        count = int(count_string)
        if not INT64_MIN <= count <= INT64_MAX:
            raise MetricsListParseError(line, reason=f"metric count {count_string!r} out of range")
        metric_counts[metric_name] = count
    return metric_counts


def format_metric_list(metric_counts: Mapping[str, int]) -> str:
    """Render counts in the /metrics-list format"""
    return "".join(f"{name}:{count}\n" for name, count in metric_counts.items())


def parse_metrics_samples(body: str) -> List[MetricSample]:
    """Decode the JSON body of /metrics-samples, keeping the server's order"""
    try:
        raw_samples = json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise MetricsSamplesDecodeError(f"invalid JSON in metrics samples response: {e}") from e

    if raw_samples is None:
        return []
    if not isinstance(raw_samples, list):
        raise MetricsSamplesDecodeError(
            f"expected a JSON list of metric samples, got {type(raw_samples).__name__}"
        )
    return [_decode_sample(index, raw) for index, raw in enumerate(raw_samples)]


def _decode_sample(index: int, raw: Any) -> MetricSample:
    if not isinstance(raw, dict):
        raise MetricsSamplesDecodeError(f"sample {index} is not a JSON object: {raw!r}")

    fields = _match_fields(raw)
    metric = fields.get("metric")
    value = fields.get("value")
    labels = fields.get("labels")
    timestamp = fields.get("timestamp")

    if metric is None:
        metric = ""
    elif not isinstance(metric, str):
        raise MetricsSamplesDecodeError(f"sample {index}: 'metric' must be a string, got {metric!r}")

    if value is None:
        value = 0.0
    elif isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MetricsSamplesDecodeError(f"sample {index}: 'value' must be a number, got {value!r}")
    else:
        try:
            value = float(value)
        except OverflowError:
            value = math.inf
        if math.isinf(value):
            raise MetricsSamplesDecodeError(f"sample {index}: 'value' is out of range")

    if labels is None:
        labels = {}
    elif not isinstance(labels, dict) or not all(isinstance(v, str) for v in labels.values()):
        raise MetricsSamplesDecodeError(f"sample {index}: 'labels' must map strings to strings, got {labels!r}")

    if timestamp is None:
        timestamp = 0
    elif isinstance(timestamp, bool) or not isinstance(timestamp, int) or not 0 <= timestamp <= UINT64_MAX:
        raise MetricsSamplesDecodeError(
            f"sample {index}: 'timestamp' must be an unsigned 64-bit integer, got {timestamp!r}"
        )

    return MetricSample(
        metric=metric,
        value=value,
        labels=dict(labels),
        timestamp=timestamp,
    )


def _match_fields(raw: Dict[str, Any]) -> Dict[str, Any]:
    # keys match case-insensitively; with several spellings of one key the last wins
    fields: Dict[str, Any] = {}
    for key, value in raw.items():
        name = key.lower()
        if name in _SAMPLE_FIELDS:
            fields[name] = value
    return fields


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"{constant} is not valid JSON")
