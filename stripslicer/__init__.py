"""Cut tall images into strips along uniform rows."""

__version__ = "0.1.0"