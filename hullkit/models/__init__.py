from hullkit.models.requests import HullRequest
from hullkit.models.responses import HullResponse

__all__ = ["HullRequest", "HullResponse"]
