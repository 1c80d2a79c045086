"""hostsync - Address Snapshots

An AddressSnapshot is produced fresh on every poll. The reconciler keeps the one
it last rendered to disk and compares each new poll against it.
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


def set_equal(a: Iterable[str], b: Iterable[str]) -> bool:
    """Order-insensitive comparison of two address collections.

    Duplicates are collapsed on both sides before comparing, so
    ``set_equal(["a", "b"], ["a", "a"])`` is False and the relation stays
    symmetric.
    """
    left, right = set(a), set(b)
    if len(left) != len(right):
        return False
    return all(addr in left for addr in right)


@dataclass(frozen=True)
class AddressSnapshot:
    """IPv4 and IPv6 addresses bound to the designated interface at one poll."""
    ipv4: Tuple[str, ...] = ()
    ipv6: Tuple[str, ...] = ()

    def differs_from(self, other: Optional["AddressSnapshot"]) -> bool:
        """True if either family changed. ``None`` means nothing applied yet."""
        if other is None:
            return True
        return not (set_equal(self.ipv4, other.ipv4) and set_equal(self.ipv6, other.ipv6))


@dataclass(frozen=True)
class HostIdentity:
    hostname: str
    short_hostname: str

    @classmethod
    def from_hostname(cls, hostname: str) -> "HostIdentity":
        return cls(hostname=hostname, short_hostname=hostname.split(".", 1)[0])
