"""
Core module - settings and small shared building blocks.
"""
