"""Server side of the portfolio site: link-metadata extraction and previews."""

__version__ = "1.0.0"
