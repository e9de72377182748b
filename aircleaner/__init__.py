"""A Lightning Air Cleaner: an arcade game of chained lightning against falling dust."""

__version__ = "0.1.0"