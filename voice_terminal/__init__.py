"""voice_terminal package: natural-language phrases to whitelisted shell commands over HTTP.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
