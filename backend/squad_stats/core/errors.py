"""
Domain errors raised below the routing layer.

Routers translate these into HTTP responses:
- NotFoundError -> 404
- UpstreamUnavailableError -> 503

Malformed request bodies never get this far; FastAPI rejects them with a 422
through the pydantic schemas in `squad_stats.schemas`.
"""


class SquadStatsError(Exception):
    """Base class for errors raised by the service layer."""


class NotFoundError(SquadStatsError):
    def __init__(self, resource: str, identifier=None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class UpstreamUnavailableError(SquadStatsError):
    """A remote dependency (AI provider) could not answer."""

    def __init__(self, service: str, reason: str = ""):
        self.service = service
        self.reason = reason
        message = f"{service} is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
