"""Console marketplace for listing, browsing and removing cars and bikes."""

__version__ = "0.1.0"
__all__ = ["__version__"]