"""
hostsync - Snapshot State
"""
from .snapshot import AddressSnapshot, HostIdentity, set_equal

__all__ = ["AddressSnapshot", "HostIdentity", "set_equal"]
