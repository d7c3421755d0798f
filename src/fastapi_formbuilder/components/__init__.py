"""Built-in flow components."""

from fastapi_formbuilder.components.form_setup import FormSetup, collect_params

__all__ = [
    "FormSetup",
    "collect_params",
]
