from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Depends, Form, Query, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse

from core.config import SITE_NAME, TIMEZONE
from core.db import create_db_engine
from core.exceptions import handle_exception
from core.logger import logging
from model.page import Page, PageInput
from wiki.naming import to_kebab
from wiki.render import markdown_to_html, templates
from wiki.store import PageStore


def timestamp() -> datetime:
    return datetime.now(TIMEZONE)


def get_store(request: Request) -> PageStore:
    """Page store of the running app"""
    return request.app.state.store


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.info(f"Wiki store: {app.state.store.engine.url}")

    yield  # Application runs here until shutdown

    app.state.store.engine.dispose()


def create_app(store: Optional[PageStore] = None) -> FastAPI:
    """
    Build the wiki application
    Args:
        store: Page store used by every request; defaults to the configured database
    Returns:
        FastAPI app with the wiki routes
    """
    app = FastAPI(lifespan=lifespan, openapi_url=None)
    app.state.store = store or PageStore(create_db_engine())

    # /edit must be registered before the /{page_name} catch-all
    app.add_api_route("/", index, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route("/edit", edit_page, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route("/{page_name}", view_page, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route("/{page_name}", save_page, methods=["POST"])
    return app


def index(request: Request):
    """Welcome page"""
    return templates.TemplateResponse(
        request, "welcome.html", {"title": f"Welcome To {SITE_NAME}"}
    )


def edit_page(
    request: Request,
    page_name: str = Query("", alias="pageName"),
    store: PageStore = Depends(get_store),
):
    """Edit form for an existing page"""
    found, page = store.load_page(page_name)
    if not found:
        return Response(status_code=404)

    form = PageInput(id=page.id, name=page_name, content=page.content)
    return templates.TemplateResponse(
        request, "edit.html", {"title": page_name, "form": form, "path": page_name}
    )


def view_page(request: Request, page_name: str, store: PageStore = Depends(get_store)):
    """Render a page, or the form to create it"""
    found, page = store.load_page(page_name)
    if found:
        return templates.TemplateResponse(
            request,
            "page.html",
            {
                "title": page_name,
                "page_name": page_name,
                "content_html": markdown_to_html(page.content),
            },
        )

    form = PageInput(name=page_name)
    return templates.TemplateResponse(
        request, "edit.html", {"title": page_name, "form": form, "path": page_name}
    )


def save_page(
    page_name: str,
    page_id: str = Form("", alias="Id"),
    name: str = Form("", alias="Name"),
    content: str = Form("", alias="Content"),
    store: PageStore = Depends(get_store),
):
    """Create or update a page, then go back to it"""
    # Not used as storage key or redirect target
    proper_name = to_kebab(name)
    logging.debug(f"Saving page {name!r} ({proper_name})")

    page = Page(name=name, content=content, last_modified=timestamp())

    try:
        if page_id:
            page.id = int(page_id)
    except ValueError as e:
        handle_exception(e, f"Invalid page id {page_id!r}", source="web")
    else:
        ok, page, error = store.save_page(page)
        if not ok:
            logging.error(f"Error {error}")

    return RedirectResponse(f"/{page_name}", status_code=302)


app = create_app()
