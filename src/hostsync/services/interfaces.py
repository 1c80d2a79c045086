"""hostsync - Interface Address Reader

Reads the addresses bound to the interface named in the main interface file,
using the JSON output of ``ip addr show``.
"""
import ipaddress
import json
import logging
import subprocess
from pathlib import Path
from typing import List

from hostsync.errors import InterfaceLookupError, InterfaceNotFoundError, MainInterfaceError
from hostsync.state.snapshot import AddressSnapshot

logger = logging.getLogger(__name__)


def read_main_interface(path: str) -> str:
    """Return the first line of the main interface file, stripped."""
    try:
        with open(path) as f:
            name = f.readline().strip()
    except OSError as e:
        raise MainInterfaceError(f"Cannot read {path}: {e}") from e

    if not name:
        raise MainInterfaceError(f"{path} does not name an interface")
    return name


class InterfaceAddressReader:
    """Query the interface table for the designated interface's addresses."""

    def __init__(self, interface_file: str = "/etc/main_interface", ip_cmd: str = "ip", timeout: int = 5):
        self.interface_file = Path(interface_file)
        self.ip_cmd = ip_cmd
        self.timeout = timeout

    def read_addresses(self) -> AddressSnapshot:
        # Interface file is re-read every call so a reassignment is picked up live
        interface = read_main_interface(str(self.interface_file))
        entry = self._find_interface(self._interface_table(), interface)

        ipv4: List[str] = []
        ipv6: List[str] = []
        for info in entry.get("addr_info", []):
            local = info.get("local")
            try:
                addr = ipaddress.ip_address(local)
            except ValueError:
                logger.debug(f"Skipping unparseable address {local!r} on {interface}")
                continue
            if addr.is_loopback:
                continue
            family = ipv4 if addr.version == 4 else ipv6
            text = str(addr)
            if text not in family:
                family.append(text)

        return AddressSnapshot(ipv4=tuple(ipv4), ipv6=tuple(ipv6))

    def _interface_table(self) -> list:
        try:
            result = subprocess.run(
                [self.ip_cmd, "-j", "addr", "show"],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise InterfaceLookupError(f"Cannot query interface table: {e}") from e

        if result.returncode != 0:
            raise InterfaceLookupError(
                f"'{self.ip_cmd} addr show' failed ({result.returncode}): {result.stderr.strip()}"
            )

        try:
            table = json.loads(result.stdout or "[]")
        except ValueError as e:
            raise InterfaceLookupError(f"Unparseable interface table: {e}") from e

        if not isinstance(table, list):
            raise InterfaceLookupError("Unexpected interface table format")
        return table

    @staticmethod
    def _find_interface(table: list, interface: str) -> dict:
        for entry in table:
            if isinstance(entry, dict) and entry.get("ifname") == interface:
                return entry
        raise InterfaceNotFoundError(interface)
