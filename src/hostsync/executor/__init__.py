"""
hostsync - File Executors
"""
