"""
Test suite for the context runtime.
"""
