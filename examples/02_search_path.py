"""
Search path example of fastapi-formbuilder.

Demonstrates:
- A colon-delimited form_path with a custom suffix
- A per-route FormSetup without a registry
- Adding a custom component that runs after the form is built
"""

import logging

from fastapi import Depends, FastAPI

from fastapi_formbuilder import (
    ComponentCategory,
    Flow,
    FlowComponent,
    FormConfig,
    FormConfigResolver,
    FormSetup,
    RequestContext,
    flow_dependency,
)

# DEBUG makes the resolver log its lookups and hand debug=2 to the form
logging.basicConfig(level=logging.DEBUG)

config = FormConfig(
    form={
        "form_path": "/etc/myapp/forms : ./root/forms",
        "form_suffix": ".yml",
        "method": "post",
    }
)
resolver = FormConfigResolver(config)


class CountryOptions(FlowComponent):
    """Fills the country field's options once the form exists."""

    category = ComponentCategory.CUSTOM

    async def resolve(self, ctx: RequestContext) -> None:
        if ctx.form is not None:
            ctx.form.field("country", options=["FR", "DE", "US"], other=1)


app = FastAPI(title="Search Path Example")

signup_flow = flow_dependency(
    Flow(CountryOptions(), FormSetup(resolver, name="", title="Sign up"))
)


@app.get("/signup")
async def signup(ctx: RequestContext = Depends(signup_flow)):
    return ctx.form.to_dict()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
