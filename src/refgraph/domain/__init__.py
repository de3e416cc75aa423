"""Domain layer: graph types, index, traversal and subgraph assembly.

Pure in-memory code with no I/O. Infrastructure and services import from
here, never the other way around.
"""
