"""css_colours.core — Foundation layer.

Contains the colour value types, constructors, pixel interop, env loading
and report builder. This module has NO dependencies on css_colours.commands
or css_colours.registry. Only stdlib, numpy, and PIL are allowed here.
"""
