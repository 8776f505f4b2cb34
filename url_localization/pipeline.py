"""Explicit request pipeline in front of a WSGI application."""

from __future__ import annotations

from typing import Callable, Iterable, Protocol

from werkzeug.wrappers import Request

WSGIApp = Callable  # (environ, start_response) -> iterable of bytes
Next = Callable[[Request], WSGIApp]


class Stage(Protocol):
    def handle(self, request: Request, next: Next) -> WSGIApp:
        """Return the WSGI application that answers ``request``.

        A stage either answers itself (a Werkzeug response is a WSGI app) or
        delegates by returning ``next(request)``.
        """


class StagePipeline:
    """WSGI application running ``stages`` in order before ``app``."""

    def __init__(self, app: WSGIApp, stages: Iterable[Stage] = ()) -> None:
        self.app = app
        self.stages = list(stages)

    def _dispatch(self, index: int, request: Request) -> WSGIApp:
        if index >= len(self.stages):
            return self.app
        stage = self.stages[index]
        return stage.handle(request, lambda req: self._dispatch(index + 1, req))

    def __call__(self, environ, start_response):
        request = Request(environ)
        handler = self._dispatch(0, request)
        return handler(request.environ, start_response)


__all__ = ['Next', 'Stage', 'StagePipeline', 'WSGIApp']
