"""Streaming temperature monitoring with a min-max heap and spike alerts."""

__version__ = "0.1.0"
__all__ = ["minmaxheap", "monitor", "reading", "stream"]