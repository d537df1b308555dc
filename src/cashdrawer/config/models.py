"""Schema of ``cashdrawer.toml``.

Every key is optional; what the file leaves out keeps the value baked in
here, so an empty file (or none at all) opens the standard Euro float.
Unknown keys are rejected so a misspelt section does not silently fall
back to defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DrawerConfig(BaseModel):
    """[drawer] section.

    ``opening_counts`` is keyed by denomination as written in TOML
    (``"0.5" = 10``); denominations left out keep their default count.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    currency_label: str = "Euro"
    currency_symbol: str = "€"
    opening_counts: dict[str, int] = Field(default_factory=dict)


class CashDrawerConfig(BaseModel):
    """A whole ``cashdrawer.toml``: the [drawer] section plus top-level
    defaults for the output flags (``quiet = true`` and so on)."""

    model_config = {"frozen": True, "extra": "forbid"}

    drawer: DrawerConfig = Field(default_factory=DrawerConfig)
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
