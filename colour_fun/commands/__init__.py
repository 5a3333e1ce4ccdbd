"""CLI commands.

Every .py file in this package that defines a `command` object is
auto-registered by colour_fun.registry.discover(). The module docstring is
the command's long help (`colour-fun help <command>`).
"""
