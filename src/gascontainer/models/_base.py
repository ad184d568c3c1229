"""Base model for gas container wire payloads.

Every wire model inherits from :class:`GasBaseModel` which maps the
camelCase JSON keys (``isDestroyed``) onto snake_case fields
(``is_destroyed``) and freezes the instance after validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GasBaseModel(BaseModel):
    """Base for request and response payloads."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used on the wire."""
        return self.model_dump(by_alias=True)
