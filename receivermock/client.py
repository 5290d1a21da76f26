"""HTTP client for the receiver-mock API"""
import ssl
from typing import Any, Dict, List, Optional, Union

import httpx

from .config import Config
from .logging_config import get_logger, log_error, log_receiver_request, log_receiver_response
from .errors import ReceiverRequestError, ReceiverStatusError
from .models import MetadataFilters, MetricCounts, MetricSample
from .parsing import parse_metric_list, parse_metrics_samples

logger = get_logger(__name__)

VerifyTypes = Union[bool, str, ssl.SSLContext]

METRICS_LIST_PATH = "metrics-list"
METRICS_SAMPLES_PATH = "metrics-samples"


class ReceiverMockClient:
    """Read-only client for the receiver-mock statistics endpoints

    Endpoint paths are resolved relative to ``base_url``. Unless an
    ``http_client`` is injected, every call opens and closes its own
    ``httpx.Client``, so one instance can be shared freely.
    """

    def __init__(self, base_url: Union[str, httpx.URL], verify: VerifyTypes = True,
                 http_client: Optional[httpx.Client] = None):
        self._base_url = httpx.URL(base_url)
        self._verify = verify
        self._http_client = http_client

    @classmethod
    def from_config(cls, config: Config, http_client: Optional[httpx.Client] = None) -> "ReceiverMockClient":
        """Create a client from environment-based settings"""
        return cls(config.receiver_mock_url, verify=config.get_verify(), http_client=http_client)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def verify(self) -> VerifyTypes:
        return self._verify

    def url_for(self, path: str) -> httpx.URL:
        """Resolve an endpoint path against the base URL"""
        return self._base_url.join(path)

    def get_metric_counts(self) -> MetricCounts:
        """Fetch how many times each metric has been observed"""
        response = self._get(METRICS_LIST_PATH)
        try:
            metric_counts = parse_metric_list(response.text)
        except ValueError as e:
            log_error(logger, e, {"endpoint": METRICS_LIST_PATH, "url": str(response.url)})
            raise
        log_receiver_response(logger, METRICS_LIST_PATH, response.status_code, len(metric_counts))
        return metric_counts

    def get_metrics_samples(self, metadata_filters: Optional[MetadataFilters] = None) -> List[MetricSample]:
        """Fetch individual metric samples matching the given label filters"""
        params = self._build_params(metadata_filters)
        response = self._get(METRICS_SAMPLES_PATH, params=params)
        try:
            samples = parse_metrics_samples(response.text)
        except ValueError as e:
            log_error(logger, e, {"endpoint": METRICS_SAMPLES_PATH, "url": str(response.url)})
            raise
        log_receiver_response(logger, METRICS_SAMPLES_PATH, response.status_code, len(samples))
        return samples

    @staticmethod
    def _build_params(metadata_filters: Optional[MetadataFilters]) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        for key, value in (metadata_filters or {}).items():
            if isinstance(value, str):
                params[key] = value
            else:
                params[key] = list(value)
        return params

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        url = self.url_for(path)
        log_receiver_request(logger, path, str(url), params)

        try:
            if self._http_client is not None:
                response = self._http_client.get(url, params=params, follow_redirects=True)
            else:
                with httpx.Client(verify=self._verify, follow_redirects=True) as http_client:
                    response = http_client.get(url, params=params)
        except httpx.HTTPError as e:
            error = ReceiverRequestError(str(url), f"failed fetching {url}, err: {e}")
            log_error(logger, error, {"endpoint": path})
            raise error from e

        if response.status_code != 200:
            error = ReceiverStatusError(response.status_code, str(response.url))
            log_error(logger, error, {"endpoint": path})
            raise error
        return response

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={str(self._base_url)!r})"
