"""
Basic usage example of fastapi-formbuilder.

Demonstrates:
- Loading form defaults from app.yaml (home is the examples directory)
- Registering routes that need a form
- Reusing another route's form config by name
"""

from pathlib import Path

from fastapi import Depends, FastAPI

from fastapi_formbuilder import (
    Flow,
    FormConfigResolver,
    FormRegistry,
    FormSetup,
    RequestContext,
    flow_dependency,
    load_form_config,
)

app = FastAPI(title="Basic FormBuilder Example")

forms = FormRegistry()
resolver = FormConfigResolver(load_form_config(Path(__file__).parent / "app.yaml"))
form_flow = flow_dependency(Flow(FormSetup(resolver, registry=forms)))


# Looks for root/forms/books/edit.fb
@app.api_route("/books/edit", methods=["GET", "POST"])
@forms.form()
async def edit(ctx: RequestContext = Depends(form_flow)):
    form = ctx.form
    form.field("desc", label="Book Description", required=1)
    if form.submitted and form.validate():
        return {"saved": form.params}
    return form.to_dict()


# Same layout as edit, rendered read-only
@app.get("/books/view")
@forms.form("/books/edit")
async def view(ctx: RequestContext = Depends(form_flow)):
    ctx.form.static = True
    return ctx.form.to_dict()


# No config file: fields are set up by hand
@app.get("/contact")
@forms.form()
async def contact(ctx: RequestContext = Depends(form_flow)):
    ctx.form.field("email", validate="EMAIL", required=1)
    return ctx.form.to_dict()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl http://localhost:8000/books/edit
    # curl -d "_submitted_books_edit=1&title=Dune&author=Frank Herbert&isbn=0441172717" \
    #      http://localhost:8000/books/edit
    # curl http://localhost:8000/books/view
