"""Default form object built from resolved options and a YAML source file."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Annotated, Any

import yaml
from pydantic import EmailStr, StringConstraints, TypeAdapter, ValidationError
from pydantic_core import SchemaError

# Options computed per request; a source file never overrides these.
_REQUEST_OPTIONS = ("params", "action", "debug", "source")

_NAMED_RULES: dict[str, Any] = {
    "EMAIL": EmailStr,
    "INT": int,
    "NUM": float,
    "NAME": Annotated[
        str, StringConstraints(pattern=r"^[A-Za-z]+(?:[\s.'-][A-Za-z]+)*$")
    ],
}


def load_source(source: str) -> dict[str, Any]:
    """Parse a form config file. An empty file yields an empty mapping."""
    with open(source, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Form config {source} must contain a mapping")
    return dict(data)


class Form:
    """Field definitions, submitted values and validation for one request.

    Usage:
        form = ctx.form
        form.field("email", validate="EMAIL", required=True)
        if form.submitted and form.validate():
            ...
    """

    def __init__(self, **options: Any) -> None:
        source = options.get("source")
        settings = {k: v for k, v in options.items() if k not in _REQUEST_OPTIONS}
        if source:
            settings.update(
                (k, v)
                for k, v in load_source(source).items()
                if k not in _REQUEST_OPTIONS
            )

        self.source: str | None = source
        self.params: dict[str, Any] = dict(options.get("params") or {})
        self.action: str = options.get("action", "")
        self.debug: int = options.get("debug", 0)

        self.name: str | None = settings.pop("name", None)
        self.method: str = settings.pop("method", "post")
        self.submit: Any = settings.pop("submit", None)
        self.static: bool = bool(settings.pop("static", False))
        self.fields: dict[str, dict[str, Any]] = {}
        self.errors: dict[str, str] = {}

        for field_name, attrs in _normalize_fields(settings.pop("fields", None)):
            self.field(field_name, **attrs)

        self.options: dict[str, Any] = settings

    def field(self, name: str, **attrs: Any) -> dict[str, Any]:
        """Add a field, or update the attributes of an existing one."""
        self.fields.setdefault(name, {}).update(attrs)
        return self.fields[name]

    def value(self, name: str) -> Any:
        value = self.params.get(name)
        if value is None:
            return self.fields.get(name, {}).get("value")
        return value

    @property
    def submitted(self) -> bool:
        marker = f"_submitted_{self.name}" if self.name else "_submitted"
        return marker in self.params

    def validate(self) -> bool:
        """Check required fields and ``validate`` patterns; fills ``errors``."""
        self.errors = {}
        for name, attrs in self.fields.items():
            values = self.value(name)
            if not isinstance(values, list):
                values = [values]
            values = [str(v) for v in values if v is not None and str(v) != ""]

            if not values:
                if attrs.get("required"):
                    self.errors[name] = "required"
                continue

            adapter = _adapter(attrs.get("validate"))
            if adapter is None:
                continue
            for v in values:
                try:
                    adapter.validate_python(v)
                except ValidationError as e:
                    # Only keep first error per field
                    self.errors[name] = e.errors()[0]["msg"]
                    break

        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "method": self.method,
            "action": self.action,
            "fields": {name: dict(attrs) for name, attrs in self.fields.items()},
            "submit": self.submit,
            "static": self.static,
            "errors": dict(self.errors),
        }


def _normalize_fields(fields: Any) -> list[tuple[str, dict[str, Any]]]:
    if not fields:
        return []
    if isinstance(fields, Mapping):
        return [(str(name), dict(attrs or {})) for name, attrs in fields.items()]
    if isinstance(fields, str):
        return [(fields, {})]
    return [(str(name), {}) for name in fields]


def _adapter(rule: Any) -> TypeAdapter[Any] | None:
    if not rule:
        return None
    return _build_adapter(str(rule))


@lru_cache(maxsize=None)
def _build_adapter(rule: str) -> TypeAdapter[Any]:
    if rule in _NAMED_RULES:
        return TypeAdapter(_NAMED_RULES[rule])
    if len(rule) > 1 and rule.startswith("/") and rule.endswith("/"):
        try:
            return TypeAdapter(Annotated[str, StringConstraints(pattern=rule[1:-1])])
        except SchemaError as e:
            raise ValueError(f"Invalid validation pattern: {rule}") from e
    raise ValueError(f"Unknown validation rule: {rule}")
