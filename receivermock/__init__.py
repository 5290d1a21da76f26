"""Test-support client for the receiver-mock telemetry receiver"""
from .client import ReceiverMockClient
from .errors import (
    MetricsListParseError,
    MetricsSamplesDecodeError,
    ReceiverMockError,
    ReceiverRequestError,
    ReceiverStatusError,
)
from .models import MetadataFilters, MetricCounts, MetricSample, samples_by_time
from .parsing import format_metric_list, parse_metric_list, parse_metrics_samples
from .tunnel import Tunnel, client_through_tunnel, new_client_with_tunnel

__all__ = [
    'ReceiverMockClient',
    'ReceiverMockError',
    'ReceiverRequestError',
    'ReceiverStatusError',
    'MetricsListParseError',
    'MetricsSamplesDecodeError',
    'MetadataFilters',
    'MetricCounts',
    'MetricSample',
    'samples_by_time',
    'format_metric_list',
    'parse_metric_list',
    'parse_metrics_samples',
    'Tunnel',
    'client_through_tunnel',
    'new_client_with_tunnel',
]
