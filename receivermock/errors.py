"""Exceptions raised by the receiver-mock client"""
from typing import Optional


class ReceiverMockError(Exception):
    """Base class for all receiver-mock client errors"""


class ReceiverRequestError(ReceiverMockError):
    """The request never produced a response (connection refused, timeout, ...)"""

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        super().__init__(message or f"failed fetching {url}")


class ReceiverStatusError(ReceiverMockError):
    """Receiver-mock answered with something other than 200"""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(
            f"received status code {status_code} in response to receiver request at {url!r}"
        )


class MetricsListParseError(ReceiverMockError, ValueError):
    """A /metrics-list line could not be parsed"""

    def __init__(self, line: str, reason: str = "failed to parse metrics list line"):
        self.line = line
        super().__init__(f"{reason}: {line!r}")


class MetricsSamplesDecodeError(ReceiverMockError, ValueError):
    """The /metrics-samples body is not a JSON list of samples"""
