"""
Shared settings and logging helpers.
It groups related modules under a stable import path and keeps package boundaries explicit.
"""
