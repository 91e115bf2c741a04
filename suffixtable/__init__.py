"""Public suffix and eTLD+1 lookups over a caller-supplied, bit-packed suffix table."""

__version__ = "0.1.0"