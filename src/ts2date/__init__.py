"""ts2date: rewrite legacy ``/Date(<millis>)/`` attributes as calendar dates."""

__version__ = "0.1.0"
