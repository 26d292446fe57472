"""ReelSift — Actor and movie metadata aggregation across pluggable providers."""

__version__ = "0.1.0"
