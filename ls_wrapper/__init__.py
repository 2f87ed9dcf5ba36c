"""ls_wrapper package: translate Unix 'ls' invocations into native Windows commands.

This package exposes submodules directly; keep __all__ minimal to avoid static checks
that expect module-level symbols.
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
