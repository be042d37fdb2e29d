"""
Configuration module for grade ordering.

Provides settings, constants and logging configuration. Import from the
submodules directly; core models depend on ``config.constants``.
"""
