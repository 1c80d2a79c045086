#!/usr/bin/env python3
"""
hostsync - Main Entry Point

Keeps /etc/hosts synchronized with the addresses of the designated interface:
1. Reads the interface name from /etc/main_interface
2. Polls its IPv4/IPv6 addresses every poll_interval seconds
3. Re-renders /etc/hosts from the jinja2 template when the address set changes
"""
import asyncio
import logging
import signal
import sys

from hostsync.config import load_config
from hostsync.daemon.reconcile import HostsReconciler
from hostsync.errors import StartupError
from hostsync.executor.hosts import HostsFileWriter
from hostsync.renderer.hosts import HostsRenderer
from hostsync.services.interfaces import InterfaceAddressReader

logger = logging.getLogger("hostsync")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def main():
    """Main entry point."""
    config = load_config()
    setup_logging(config.log_level)

    logger.info("hostsync starting...")
    logger.info(f"Interface file: {config.interface_file}")
    logger.info(f"Template: {config.template_path}")
    logger.info(f"Destination: {config.hosts_path}")

    daemon = HostsReconciler(
        reader=InterfaceAddressReader(config.interface_file),
        renderer=HostsRenderer(),
        writer=HostsFileWriter(config.hosts_path, config.hosts_mode),
        template_path=config.template_path,
        poll_interval=config.poll_interval,
    )

    run_task = asyncio.ensure_future(daemon.run())

    # Handle shutdown signals
    loop = asyncio.get_running_loop()

    def shutdown_handler():
        logger.info("Shutdown signal received")
        # Wakes the loop from its sleep
        run_task.cancel()

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, shutdown_handler)

    try:
        await run_task
    except asyncio.CancelledError:
        logger.debug("Poll loop cancelled")
        await daemon.stop()

    logger.info("hostsync stopped")


def run():
    try:
        asyncio.run(main())
    except StartupError as e:
        # Logging may not be configured yet if the config itself failed
        setup_logging()
        logger.error(f"Fatal: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
