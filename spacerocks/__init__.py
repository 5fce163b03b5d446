"""An arcade asteroids game built on pygame: ship, rocks, saucers, menus and level files."""

__version__ = "1.0.0"