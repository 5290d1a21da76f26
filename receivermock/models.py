"""Value types returned by receiver-mock"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Union

# Metric name -> number of times the metric was observed
MetricCounts = Dict[str, int]

# Query parameter name -> value(s); list values repeat the parameter
MetadataFilters = Mapping[str, Union[str, Sequence[str]]]


@dataclass(frozen=True)
class MetricSample:
    """Single observed data point of a metric

    Labels are copied into a read-only mapping, so samples are hashable and
    can be collected into sets.
    """
    metric: str = ""
    value: float = 0.0
    labels: Mapping[str, str] = field(default_factory=dict)
    timestamp: int = 0

    def __post_init__(self):
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def __hash__(self) -> int:
        return hash((self.metric, self.value, frozenset(self.labels.items()), self.timestamp))


def samples_by_time(samples: Iterable[MetricSample]) -> List[MetricSample]:
    """Return the samples ordered newest first"""
    return sorted(samples, key=lambda sample: sample.timestamp, reverse=True)
