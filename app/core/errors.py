"""Application error taxonomy."""


class HelloHumansError(Exception):
    """Base class for service errors."""


class ConfigurationError(HelloHumansError):
    """Required environment configuration or password file is missing/unreadable."""


class DependencyUnavailableError(HelloHumansError):
    """Database did not become reachable before the startup timeout."""


class StorageUnavailableError(HelloHumansError):
    """Database became unreachable while serving a request."""
