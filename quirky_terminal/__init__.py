"""
Terminal system fetch: host facts printed beside ASCII art.
"""

__all__ = ["art", "cli", "formatting", "modules", "renderer", "system_state"]
__version__ = "0.1.0"
