"""chatfmt.core — Foundation layer.

Contains the colour table, type definitions, the formatting pipeline,
the config loader and the output encoders.
This module has NO dependencies on chatfmt.renderers or chatfmt.registry.
Only the standard library is allowed here.
"""
