"""Library defaults for new tables. Overridable through PI_TABLE_* env vars."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Defaults applied when a :class:`~pi.table.Table` is created."""

    style: str = "ascii"
    padding_left: int = 1
    padding_right: int = 1
    truncation_suffix: str = ""
    tab_width: int = 3


def load_config() -> Config:
    config = Config()
    style = os.environ.get("PI_TABLE_STYLE")
    if style:
        config.style = style.strip().lower()
    suffix = os.environ.get("PI_TABLE_TRUNCATION_SUFFIX")
    if suffix is not None:
        config.truncation_suffix = suffix
    return config
