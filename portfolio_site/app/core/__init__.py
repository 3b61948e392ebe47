"""
Core infrastructure: configuration, logging, admin security and the
JSON file store.
"""
