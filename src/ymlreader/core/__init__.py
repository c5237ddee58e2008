"""
Core module - matcher, typed index and reader lifecycle.
"""
