"""
Utility functions for grade ordering: type guards and sort helpers.
"""
