"""
Ports - interfaces to collaborators outside the core.
"""
