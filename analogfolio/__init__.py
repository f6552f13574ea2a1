"""Analogfolio: build a static analog photography portfolio from a Cloudinary folder."""

__version__ = "0.1.0"
