class BenchmarkError(Exception):
    """Base class for errors reported by the benchmark tool."""


class ConfigError(BenchmarkError):
    """The requested run cannot start with the given options."""


class TransportError(BenchmarkError):
    """A request could not be sent or was answered with an error status."""


class ResponseReadError(BenchmarkError):
    """The response body could not be read to the end."""
