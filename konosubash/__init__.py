"""Building blocks for a small shell: an ordered environment, tree nodes, and text, list, line-reading and printf helpers."""

__version__ = "0.1.0"