"""
Infrastructure module - logging, settings and shared utilities.
"""
