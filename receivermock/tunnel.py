"""Reaching receiver-mock inside a test cluster through a network tunnel"""
from contextlib import contextmanager
from typing import Callable, Iterator, Protocol, Tuple, runtime_checkable

from .logging_config import get_logger
from .client import ReceiverMockClient, VerifyTypes

logger = get_logger(__name__)


@runtime_checkable
class Tunnel(Protocol):
    """Forwarded connection to receiver-mock, e.g. a kubectl port-forward"""

    def endpoint(self) -> str:
        """Local ``host:port`` the tunnel listens on"""
        ...

    def close(self) -> None:
        ...


def new_client_with_tunnel(tunnel: Tunnel, verify: VerifyTypes = True) -> Tuple[ReceiverMockClient, Callable[[], None]]:
    """Create a client talking to receiver-mock through ``tunnel``

    Returns the client and a teardown function. The caller owns the tunnel
    and must call the teardown function when done with the client.
    """
    endpoint = tunnel.endpoint()
    client = ReceiverMockClient(f"http://{endpoint}/", verify=verify)
    logger.info("Receiver-mock tunnel opened", endpoint=endpoint, event_type="tunnel_open")

    def teardown() -> None:
        tunnel.close()
        logger.info("Receiver-mock tunnel closed", endpoint=endpoint, event_type="tunnel_close")

    return client, teardown


@contextmanager
def client_through_tunnel(tunnel: Tunnel, verify: VerifyTypes = True) -> Iterator[ReceiverMockClient]:
    """Context manager variant of new_client_with_tunnel that always tears the tunnel down"""
    client, teardown = new_client_with_tunnel(tunnel, verify=verify)
    try:
        yield client
    finally:
        teardown()
