"""csvnest: convert dotted-header CSV tables into one nested JSON document."""

__version__ = "0.1.0"
