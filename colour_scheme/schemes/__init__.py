"""Auto-discovery of scheme modules.

Every .py file in this package that defines a `scheme` object is
auto-registered by colour_scheme.registry.discover().
"""
