"""Static form configuration and its YAML loader."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

DEFAULT_SUFFIX = "fb"
RESOLUTION_KEYS = ("form_path", "form_suffix")


@dataclass(frozen=True)
class FormConfig:
    """Application-wide form settings.

    ``form`` holds pass-through defaults for every form plus the two
    resolution keys ``form_path`` and ``form_suffix``. ``home`` is the
    application directory used to build the default search path.
    """

    home: str = field(default_factory=os.getcwd)
    form: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "form", MappingProxyType(dict(self.form)))

    @property
    def form_path(self) -> str | list[str]:
        path = self.form.get("form_path")
        if path:
            if isinstance(path, (list, tuple)):
                return [str(p) for p in path]
            return str(path)
        return os.path.join(self.home, "root", "forms")

    @property
    def form_suffix(self) -> str:
        suffix = self.form.get("form_suffix") or DEFAULT_SUFFIX
        return str(suffix).lstrip(".")

    @property
    def defaults(self) -> dict[str, Any]:
        """Form construction defaults, without the resolution keys."""
        return {k: v for k, v in self.form.items() if k not in RESOLUTION_KEYS}

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, home: str | None = None
    ) -> FormConfig:
        form = data.get("form") or {}
        if not isinstance(form, Mapping):
            raise ValueError("'form' config must be a mapping")
        resolved_home = data.get("home") or home or os.getcwd()
        return cls(home=str(resolved_home), form=form)


def load_form_config(path: str | os.PathLike[str]) -> FormConfig:
    """Load a FormConfig from a YAML file with top-level ``home``/``form`` keys.

    ``home`` defaults to the directory containing the YAML file.
    """
    config_path = Path(path)
    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, Mapping):
        raise ValueError(f"{config_path} must contain a mapping")

    return FormConfig.from_mapping(data, home=str(config_path.resolve().parent))
