"""
hostsync - keeps /etc/hosts in step with the addresses of one interface
"""
__version__ = "1.0.0"
