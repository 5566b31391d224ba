"""
Account status model.
"""

from pydantic import Field

from eansearch.models.base import APIModel


class AccountStatus(APIModel):
    """Request usage for the current payment cycle."""

    id: str
    requests: int = Field(..., description="Requests made in this cycle")
    request_limit: int = Field(..., alias="requestlimit")

    @property
    def remaining(self) -> int:
        """Requests still available in this cycle."""
        return max(self.request_limit - self.requests, 0)
