"""
hostsync - Configuration
"""
import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from hostsync.errors import StartupError

DEFAULT_CONFIG_PATH = "/etc/hostsync/config.json"


@dataclass
class AgentConfig:
    """Agent configuration."""
    # Inputs
    interface_file: str = "/etc/main_interface"
    template_path: str = "/etc/hosts_template.j2"

    # Output
    hosts_path: str = "/etc/hosts"
    hosts_mode: int = 0o644

    # Loop settings
    poll_interval: int = 10

    log_level: str = "INFO"


def load_config(config_path: Optional[str] = None) -> AgentConfig:
    """Load configuration from file, falling back to the built-in defaults."""
    if config_path is None:
        config_path = os.environ.get("HOSTSYNC_CONFIG", DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        return AgentConfig()

    try:
        with open(config_file) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise StartupError(f"Cannot load config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise StartupError(f"Config {config_path} must be a JSON object")

    known = {f.name for f in fields(AgentConfig)}
    unknown = set(data) - known
    if unknown:
        raise StartupError(f"Unknown config keys in {config_path}: {', '.join(sorted(unknown))}")

    # JSON has no octal literals, accept "0644" as well as 420
    if isinstance(data.get("hosts_mode"), str):
        try:
            data["hosts_mode"] = int(data["hosts_mode"], 8)
        except ValueError as e:
            raise StartupError(f"Invalid hosts_mode in {config_path}: {data['hosts_mode']!r}") from e

    return AgentConfig(**data)
