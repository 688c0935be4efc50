"""Base Pydantic model shared by IG request and response shapes.

IG uses camelCase keys on the wire; models expose snake_case attributes and
accept either spelling on input.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class IgModel(BaseModel):
    """Base for IG shapes: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class StatusResponse(IgModel):
    """Generic acknowledgement body, e.g. ``{"status": "SUCCESS"}``."""

    status: str | None = None
