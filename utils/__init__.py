"""
Shared helpers: exceptions and request cancellation.
"""
