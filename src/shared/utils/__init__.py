"""
Shared Utilities
Clock and wire-format helpers
"""
