"""HTTP wrapper around :class:`apps.generate.GenerateController`.

Endpoints only translate between HTTP and the controller: path and query
parameters go in, an :class:`~apps.generate.models.Outcome` comes out and is
rendered here.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict

from fastapi import Body, Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from lib.telemetry.logger import configure_logging

from . import GenerateController
from .models import HTML, TEXT, Outcome
from .negotiation import parse_accept


def render(outcome: Outcome) -> Response:
    if outcome.body is None:
        return Response(status_code=outcome.status)
    if outcome.media_type == HTML:
        return HTMLResponse(outcome.body, status_code=outcome.status)
    if outcome.media_type == TEXT:
        return PlainTextResponse(outcome.body, status_code=outcome.status)
    return JSONResponse(outcome.body, status_code=outcome.status)


def get_controller(request: Request) -> GenerateController:
    return request.app.state.controller


ControllerDep = Annotated[GenerateController, Depends(get_controller)]


def create_app(controller: GenerateController) -> FastAPI:
    """Build the application around an already assembled controller."""

    configure_logging(controller.config.log_level)
    app = FastAPI(title="Message Generate Service")
    app.state.controller = controller

    @app.get("/versions")
    def versions(ctl: ControllerDep):
        """Versions of the service and of every loaded protocol."""
        return ctl.get_versions()

    @app.get("/event_types/{mp}")
    def event_types(mp: str, ctl: ControllerDep):
        """Event types the ``mp`` protocol can generate."""
        return render(ctl.event_types(mp))

    @app.get("/template/{type}/{mp}")
    def template(type: str, mp: str, request: Request, ctl: ControllerDep):
        """Template for an event type, as JSON or as an HTML page for browsers."""
        accepted = parse_accept(", ".join(request.headers.getlist("accept")))
        return render(ctl.template(type, mp, accepted))

    @app.post("/{mp}")
    def generate(
        mp: str,
        ctl: ControllerDep,
        msg_type: Annotated[str, Query(alias="msgType")],
        body: Annotated[Dict[str, Any], Body()],
    ):
        """Generate a ``msgType`` event with the ``mp`` protocol service."""
        return render(ctl.generate(mp, msg_type, body))

    return app


controller = GenerateController()
app = create_app(controller)
