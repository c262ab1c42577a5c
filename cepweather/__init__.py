"""HTTP service that reports the current temperature at a Brazilian zipcode."""

__version__ = "0.1.0"