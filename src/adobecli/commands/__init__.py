"""
Subcommands for the adobe tool.
"""

# import each command here to simplify registration
from .assets import assets
from .config import config
from .pages import pages
from .tags import tags

__all__ = ["assets", "config", "pages", "tags"]
