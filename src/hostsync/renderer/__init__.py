"""
hostsync - Template Rendering
"""
