"""Example fixtures and walkthrough for fieldmask.

This package demonstrates library usage but is not part of the core API.
"""
