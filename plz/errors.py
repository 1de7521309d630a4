"""Exceptions raised by plz.

Library code raises these; only the CLI catches them and decides how to report
them and which exit code to use.
"""


class PlzError(Exception):
    """Base class for all plz errors."""


class ConfigParseError(PlzError):
    """The persisted config document could not be read or parsed. Fatal."""


class AliasNotFound(PlzError):
    def __init__(self, name: str):
        super().__init__(f"alias `{name}` not found")
        self.name = name


class EmptyRegistry(PlzError):
    def __init__(self):
        super().__init__("no aliases found")


class InvalidAliasName(PlzError):
    pass


class PathHasNoParent(PlzError):
    pass


class ProcessSpawnFailure(PlzError):
    pass


class ProviderNotFound(PlzError):
    """The provider has no page for the game, or the page lacks the expected markup."""


class TransportError(PlzError):
    """Timeout, connection/DNS failure or a non-404 error status."""


class DirectoryReadError(PlzError):
    pass


class GamesDirectoryUnset(PlzError):
    def __init__(self):
        super().__init__("games directory is not set (use `plz config games_directory <path>`)")


class InputReadError(PlzError):
    """Reading a line from stdin failed (EOF or closed stream)."""
