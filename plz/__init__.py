"""plz - an alias manager to help you manage your games.

Aliases map short names to game executables; `plz fetch` looks a game up on
mirror listing sites.
"""

__version__ = "0.4.0"

__all__ = ["__version__"]
