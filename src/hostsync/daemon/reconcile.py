"""hostsync - Reconciliation Daemon

Polls the designated interface and re-renders the hosts file whenever its IPv4 or
IPv6 address set changes. ``applied`` always matches what is on disk: it is only
updated after the new file has been written.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from hostsync.errors import HostSyncError, RenderError, StartupError, WriteError
from hostsync.executor.hosts import HostsFileWriter
from hostsync.renderer.hosts import HostsRenderer, build_context
from hostsync.services.identity import resolve_identity
from hostsync.services.interfaces import InterfaceAddressReader
from hostsync.state.snapshot import AddressSnapshot, HostIdentity

logger = logging.getLogger(__name__)


class HostsReconciler:
    def __init__(
        self,
        reader: InterfaceAddressReader,
        renderer: HostsRenderer,
        writer: HostsFileWriter,
        template_path: str = "/etc/hosts_template.j2",
        poll_interval: int = 10,
        identity_resolver: Callable[[], HostIdentity] = resolve_identity,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.reader = reader
        self.renderer = renderer
        self.writer = writer
        self.template_path = template_path
        self.poll_interval = poll_interval
        self.resolve_identity = identity_resolver
        self.sleep = sleep

        # None until the first successful write
        self.applied: Optional[AddressSnapshot] = None
        self.identity: Optional[HostIdentity] = None
        self._running = False

    def initialize(self) -> AddressSnapshot:
        """Take the startup snapshot. Any failure here is fatal."""
        try:
            snapshot = self.reader.read_addresses()
            # Startup check only, reconcile() resolves again before each render
            self.resolve_identity()
        except HostSyncError as e:
            raise StartupError(f"Startup failed: {e}") from e
        logger.info(
            f"Initial addresses: {len(snapshot.ipv4)} IPv4, {len(snapshot.ipv6)} IPv6"
        )
        return snapshot

    def reconcile(self, snapshot: AddressSnapshot) -> bool:
        """Apply ``snapshot`` if it differs from what is on disk.

        Returns True if the hosts file was rewritten.
        """
        if not snapshot.differs_from(self.applied):
            logger.debug("Addresses unchanged")
            return False

        logger.info(
            f"Addresses changed ({len(snapshot.ipv4)} IPv4, {len(snapshot.ipv6)} IPv6), "
            f"updating {self.writer.path}"
        )
        try:
            identity = self.resolve_identity()
            content = self.renderer.render(self.template_path, build_context(snapshot, identity))
            self.writer.write(content)
        except RenderError as e:
            logger.error(f"Error applying template: {e}")
            return False
        except WriteError as e:
            logger.error(f"Error writing hosts file: {e}")
            return False
        except HostSyncError as e:
            logger.warning(f"Skipping update: {e}")
            return False

        self.applied = snapshot
        self.identity = identity
        return True

    def tick(self) -> bool:
        try:
            snapshot = self.reader.read_addresses()
        except HostSyncError as e:
            logger.warning(f"Error reading interface addresses: {e}")
            return False
        return self.reconcile(snapshot)

    async def run(self, max_ticks: Optional[int] = None):
        """Initialize, then poll until stopped.

        ``max_ticks`` bounds the number of polls after startup; None runs forever.
        """
        self._running = True
        self.reconcile(self.initialize())

        ticks = 0
        while self._running and (max_ticks is None or ticks < max_ticks):
            await self.sleep(self.poll_interval)
            if not self._running:
                break
            self.tick()
            ticks += 1

    async def stop(self):
        self._running = False
