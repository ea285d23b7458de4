"""PageLibrary - page-object keywords for Robot Framework."""

from robotpages.lib.PageLibrary import PageLibrary

__all__ = ["PageLibrary"]
