"""Outcome of the startup index provisioning step."""

from pydantic import BaseModel


class ProvisioningResult(BaseModel):
    """What ``provision_index`` did to the index, and why it stopped if it failed."""
    index: str
    deleted: bool = False
    created: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
