"""
Outbound adapters - text sources the reader can load from.
"""
