"""
Core infrastructure: settings, logging, JSON storage and error types.
"""
