"""
hostsync - Reconciliation Daemon
"""
