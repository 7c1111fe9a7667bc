"""
Core components: app factory, lifecycle, shared domain pieces.
"""
