"""
hostsync - Test Fixtures

Shared pytest fixtures for agent tests.
"""
import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hostsync.state.snapshot import AddressSnapshot, HostIdentity  # noqa: E402


def ip_table(*interfaces):
    """Build `ip -j addr show` output from (ifname, [addresses]) pairs."""
    table = []
    for ifname, addresses in interfaces:
        addr_info = []
        for addr in addresses:
            family = "inet6" if ":" in addr else "inet"
            addr_info.append({"family": family, "local": addr, "prefixlen": 64 if family == "inet6" else 24})
        table.append({"ifindex": len(table) + 1, "ifname": ifname, "addr_info": addr_info})
    return json.dumps(table)


@pytest.fixture
def mock_subprocess():
    """Mock subprocess calls for the interface table query."""
    with patch("hostsync.services.interfaces.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="[]", stderr="")
        yield mock_run


@pytest.fixture
def interface_file(tmp_path):
    path = tmp_path / "main_interface"
    path.write_text("eth0\n")
    return path


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "hosts_template.j2"
    path.write_text("{{ipv4_host_replace}}")
    return path


@pytest.fixture
def hosts_file(tmp_path):
    path = tmp_path / "hosts"
    path.write_text("127.0.0.1 localhost\n")
    return path


class ScriptedReader:
    """Address reader that replays a fixed sequence of snapshots or errors."""

    def __init__(self, script):
        self.script = list(script)
        self.calls = 0

    def read_addresses(self) -> AddressSnapshot:
        item = self.script[min(self.calls, len(self.script) - 1)]
        self.calls += 1
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def identity():
    return HostIdentity.from_hostname("host")


@pytest.fixture
def make_ip_table():
    return ip_table


@pytest.fixture
def scripted_reader():
    return ScriptedReader
