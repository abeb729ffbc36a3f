from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_WEIGHT_BITS = 64
DEFAULT_MAX_NODES = 1 << 20


class BuilderSettings(BaseModel):
    """Limits applied to every tree expansion."""

    # Width of the unsigned integer holding inverse probability weights
    weight_bits: int = Field(default=DEFAULT_WEIGHT_BITS, ge=1, le=1024)
    # Ceiling on nodes per tree; a tree for D has 2**D nodes
    max_nodes: int = Field(default=DEFAULT_MAX_NODES, ge=1)

    model_config = {"extra": "forbid"}

    def with_overrides(self, **overrides: int | None) -> "BuilderSettings":
        """Return a copy with every non-None override applied and validated."""
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return BuilderSettings.model_validate(values)


__all__ = ["BuilderSettings", "DEFAULT_WEIGHT_BITS", "DEFAULT_MAX_NODES"]
