"""hostsync - Hosts Template Renderer"""
from pathlib import Path
from typing import Dict, Iterable

from jinja2 import Environment, StrictUndefined, TemplateError

from hostsync.errors import TemplateReadError, TemplateRenderError
from hostsync.state.snapshot import AddressSnapshot, HostIdentity

CONTEXT_KEYS = (
    "ipv6_host_replace",
    "ipv4_host_replace",
    "hostname_variable",
    "hostname_variable_extra",
)


def format_records(addresses: Iterable[str], identity: HostIdentity) -> str:
    """One "<address> <hostname> <short-hostname>" line per address."""
    return "".join(
        f"{addr} {identity.hostname} {identity.short_hostname}\n" for addr in addresses
    )


def build_context(snapshot: AddressSnapshot, identity: HostIdentity) -> Dict[str, str]:
    # Both families are always present, an empty family renders as ""
    return {
        "ipv6_host_replace": format_records(snapshot.ipv6, identity),
        "ipv4_host_replace": format_records(snapshot.ipv4, identity),
        "hostname_variable": identity.hostname,
        "hostname_variable_extra": identity.short_hostname,
    }


class HostsRenderer:
    def __init__(self):
        self.env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: Dict[str, str]) -> str:
        """Render the template file with ``context`` as its globals."""
        try:
            source = Path(template_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateReadError(f"Cannot read template {template_path}: {e}") from e

        try:
            template = self.env.from_string(source, globals=dict(context))
            return template.render()
        except TemplateError as e:
            raise TemplateRenderError(f"Cannot render template {template_path}: {e}") from e
        except Exception as e:
            # Expressions can raise plain Python errors, e.g. TypeError on str + int
            raise TemplateRenderError(f"Error evaluating template {template_path}: {e}") from e
