"""lambdaplay: hands-on tour of filter, map, reduce, and flat-map."""

__version__ = "0.1.0"
