"""refgraph: dependency neighborhood extraction for flat JSON reference graphs."""

__version__ = "0.3.0"
