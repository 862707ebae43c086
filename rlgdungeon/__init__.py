"""A terminal roguelike with generated dungeons, templated monsters and objects."""

__version__ = "1.8.0"