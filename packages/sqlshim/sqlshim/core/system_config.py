"""sqlshim: System Configuration Models
---------------------------------------------------------
Defines the Pydantic models for system-level configuration (``system.yaml``):
which capabilities the shim knows about, the module each one is acquired from,
and which capability ``require()`` resolves when called without a name.

Public API
----------
``SystemConfig`` : Root configuration model
``CapabilityConfig`` : Acquisition source and hint for one capability

Notes
-----
- Supports multi-level override: package defaults, user config, environment,
  explicit path (see ``config_loader.load_system_config``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = ["SystemConfig", "CapabilityConfig"]


class CapabilityConfig(BaseModel):
    """Where a capability comes from when it is not already bound."""

    model_config = ConfigDict(extra="forbid")

    module: str = Field(
        ...,
        description="Import target: 'pkg.module' or 'pkg.module:attribute'.",
    )
    hint: str | None = Field(
        default=None,
        description="Message shown when the capability cannot be acquired.",
    )

    @field_validator("module")
    @classmethod
    def validate_module_not_empty(cls, v: str) -> str:
        """Validate that the import target is not empty or just whitespace."""
        if not v or not v.strip():
            raise ValueError("Import target cannot be empty")
        return v.strip()


def _default_capabilities() -> dict[str, CapabilityConfig]:
    return {"SQL": CapabilityConfig(module="sqlite3")}


class SystemConfig(BaseModel):
    """System-wide configuration parameters.

    Attributes
    ----------
    capabilities : dict[str, CapabilityConfig]
        Capability name to acquisition source. Default: ``SQL -> sqlite3``.
    default_capability : str
        Capability resolved by ``require()`` when no name is given.
        Default: ``"SQL"``

    """

    model_config = ConfigDict(extra="forbid")

    capabilities: dict[str, CapabilityConfig] = Field(
        default_factory=_default_capabilities,
        description="Known capabilities and the module each is loaded from.",
    )
    default_capability: str = Field(
        default="SQL",
        description="Capability resolved when require() is called without a name.",
    )

    @field_validator("capabilities")
    @classmethod
    def validate_capability_names(
        cls, v: dict[str, CapabilityConfig]
    ) -> dict[str, CapabilityConfig]:
        """Validate that capability names are non-empty."""
        for name in v:
            if not name or not name.strip():
                raise ValueError("Capability name cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_default_declared(self) -> SystemConfig:
        """Validate that the default capability is one of the declared ones."""
        if self.default_capability not in self.capabilities:
            raise ValueError(
                f"default_capability '{self.default_capability}' is not declared "
                f"in capabilities ({sorted(self.capabilities)})"
            )
        return self
