"""Routing tree introspection: pattern decoding, layer adaptation, and the walk.

Host routing trees are read-only input; the only mutable structure is the
endpoint accumulator owned by a single walk.
"""
