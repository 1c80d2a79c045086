"""hostsync - Host Identity"""
import logging
import socket
from typing import Callable

from hostsync.errors import HostnameUnavailableError
from hostsync.state.snapshot import HostIdentity

logger = logging.getLogger(__name__)


def resolve_identity(gethostname: Callable[[], str] = socket.gethostname) -> HostIdentity:
    """Return the full hostname and its first label."""
    try:
        hostname = gethostname()
    except OSError as e:
        raise HostnameUnavailableError(f"Cannot read hostname: {e}") from e

    hostname = (hostname or "").strip()
    if not hostname:
        raise HostnameUnavailableError("Hostname is empty")

    identity = HostIdentity.from_hostname(hostname)
    logger.debug(f"Resolved identity {identity.hostname} ({identity.short_hostname})")
    return identity
