"""Configuration package.

Settings are read from the environment when ``src.config.settings`` is
imported, so import that module where needed instead of re-exporting it here.
"""

__all__: list[str] = []
