"""OEE calculation, classification and aggregation for production monitoring."""

__version__ = "0.1.0"
