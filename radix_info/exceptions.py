"""
Custom exceptions for radix-info
"""


class RadixInfoError(Exception):
    """Base exception for radix-info"""
    pass


class TransportError(RadixInfoError):
    """Network, timeout or non-success HTTP status"""

    def __init__(self, url: str, operation: str, message: str):
        self.url = url
        self.operation = operation
        super().__init__(f"Transport error for {url} during {operation}: {message}")


class MalformedInputError(RadixInfoError):
    """Payload is not valid JSON"""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Malformed JSON from {source}: {message}")


class FlattenError(RadixInfoError):
    """Document root cannot be flattened"""
    pass


class ProjectionError(RadixInfoError):
    """Expected field is absent or has the wrong type"""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Cannot project '{path}': {message}")


class EmptyAggregationError(RadixInfoError):
    """Aggregation requested over zero elements"""
    pass


class NameCollisionError(RadixInfoError):
    """Metric name registered more than once"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Metric '{name}' is already registered")


class InvalidMetricNameError(RadixInfoError):
    """Name is not a valid Prometheus metric name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}' is not a valid metric name")


class ExpositionError(RadixInfoError):
    """Textfile could not be written"""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Cannot write {path}: {message}")


class HarvestError(RadixInfoError):
    """Error during a harvest stage"""

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Stage {stage} failed: {cause}")
