"""colour_fun.core — Foundation layer.

Contains the colour value types, error taxonomy, hex codec, colour-space
conversion, contrast selection, comparison metrics, name resolution,
settings and report builder.
This module has NO dependencies on colour_fun.commands or colour_fun.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
