"""Errors raised by the greeter service."""


class GreeterError(Exception):
    """Base class for fatal service errors."""


class ConfigError(GreeterError):
    """The environment could not be turned into valid settings."""


class BindError(GreeterError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Could not bind {host}:{port}: {reason}")
