"""colour_scheme.core — Foundation layer.

Contains the colour codec, harmony and monochrome generators, palette
composer, named-colour lookup, configuration and report builder.
This module has NO dependencies on colour_scheme.schemes or colour_scheme.registry.
Only stdlib and numpy are allowed here.
"""
