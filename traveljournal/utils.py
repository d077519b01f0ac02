"""Generic helpers."""
from __future__ import annotations

from uuid import uuid4

from flask import request, session


BROWSER_ID_KEY = "browser_id"


def browser_id() -> str:
    """Identifier of the current browser, minted on first visit."""
    value = session.get(BROWSER_ID_KEY)
    if not value:
        value = uuid4().hex
        session[BROWSER_ID_KEY] = value
        session.permanent = True
    return value


def wants_json() -> bool:
    best = request.accept_mimetypes.best_match(["application/json", "text/html"])
    return best == "application/json" and (
        request.accept_mimetypes[best] > request.accept_mimetypes["text/html"]
    )
