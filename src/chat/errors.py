"""Failures raised while obtaining an answer from the answering service."""


class ResolverError(Exception):
    """Base class for resolver failures."""

    pass


class ConnectivityFailure(ResolverError):
    """The request never got a response from the target host."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Failed to reach {target}")
        self.target = target


class ProtocolFailure(ResolverError):
    """A response arrived but its status code signals an error."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class PayloadFailure(ResolverError):
    """A successful response whose body is not the expected answer payload."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
