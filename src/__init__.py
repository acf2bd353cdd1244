"""
Package marker for source code under `src`.
It groups related modules under a stable import path and keeps package boundaries explicit.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
