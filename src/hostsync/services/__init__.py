"""
hostsync - OS Queries
"""
from .identity import resolve_identity
from .interfaces import InterfaceAddressReader, read_main_interface

__all__ = ["InterfaceAddressReader", "read_main_interface", "resolve_identity"]
