"""View and edit the title, artist, album, year, content and comment frames of ID3v2 tags."""

__version__ = "1.0.0"
__all__ = ["__version__"]