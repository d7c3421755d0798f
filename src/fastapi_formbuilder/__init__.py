"""FastAPI FormBuilder - convention-based form setup for FastAPI routes."""

from fastapi_formbuilder.component import ComponentCategory, FlowComponent
from fastapi_formbuilder.components.form_setup import FormSetup
from fastapi_formbuilder.config import FormConfig, load_form_config
from fastapi_formbuilder.context import RequestContext
from fastapi_formbuilder.dependency import flow_dependency
from fastapi_formbuilder.exceptions import (
    FormAbort,
    FormException,
    FormInternalError,
    MissingRequiredSource,
)
from fastapi_formbuilder.flow import Flow
from fastapi_formbuilder.form import Form
from fastapi_formbuilder.registry import FormDescriptor, FormRegistry
from fastapi_formbuilder.resolver import FormConfigResolver, ResolvedOptions

__all__ = [
    "ComponentCategory",
    "Flow",
    "FlowComponent",
    "Form",
    "FormAbort",
    "FormConfig",
    "FormConfigResolver",
    "FormDescriptor",
    "FormException",
    "FormInternalError",
    "FormRegistry",
    "FormSetup",
    "MissingRequiredSource",
    "RequestContext",
    "ResolvedOptions",
    "flow_dependency",
    "load_form_config",
]
