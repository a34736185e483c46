"""A small side-scrolling school adventure built on pygame: menus, loading screen, courtyard and player pawn."""

__version__ = "0.1.0"