"""Output renderers, one per module.

A renderer module defines a module-level `renderer = Renderer(name=...)`
whose name matches the module name; the module docstring is its
`chatfmt help <name>` text. chatfmt.registry picks them up by scanning
this package.
"""
