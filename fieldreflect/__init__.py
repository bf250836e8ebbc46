"""Field-wise access, names, comparison, hashing and text I/O for plain record classes."""

__version__ = "0.1.0"