"""
connect4_engine.interfaces - Ways to drive the engine

This package contains the Gymnasium environment and the command-line tool.
"""

# Don't import anything here so the CLI can run without loading gymnasium
__all__ = []
