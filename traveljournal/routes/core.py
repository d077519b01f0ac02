"""HTTP route declarations."""
from __future__ import annotations

from flask import (
    Response,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)

from ..controller import FormController, Submission
from ..errors import ImageTooLarge, JournalError
from ..extensions import db
from ..localization import context_processor, get_lang, translate
from ..render import ListRenderer
from ..services.entries import EntryStore
from ..storage import SlotStorage
from ..utils import browser_id, wants_json


def register(app) -> None:
    app.context_processor(context_processor)

    app.add_url_rule("/", view_func=index)
    app.add_url_rule("/entries", view_func=create_entry, methods=["POST"])
    app.add_url_rule(
        "/entries/<int:entry_id>/delete",
        view_func=delete_entry,
        methods=["POST"],
    )
    app.add_url_rule("/entries.json", view_func=export_json)
    app.add_url_rule("/health", view_func=health)

    app.register_error_handler(404, not_found)
    app.register_error_handler(413, too_large)
    app.register_error_handler(500, internal_error)


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def _build_controller() -> FormController:
    config = current_app.config
    store = EntryStore(SlotStorage(browser_id()), config["STORAGE_KEY"])
    renderer = ListRenderer(store, lang=get_lang())
    return FormController(
        store,
        renderer,
        max_image_bytes=config["MAX_IMAGE_BYTES"],
        max_image_side=config["IMAGE_MAX_SIDE"],
    )


def _render_page(controller: FormController, status: int = 200):
    visible = controller.renderer.render_all()
    if controller.store.warning is not None:
        flash(translate(controller.store.warning.message_key), "warning")
    return (
        render_template(
            "index.html",
            form=controller.form,
            entries=visible,
            max_image_bytes=current_app.config["MAX_IMAGE_BYTES"],
        ),
        status,
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

def index():
    return _render_page(_build_controller())


def create_entry():
    controller = _build_controller()
    submission = Submission(
        city=request.form.get("city", ""),
        date=request.form.get("date", ""),
        memo=request.form.get("memo", ""),
        image=request.files.get("image"),
    )
    try:
        controller.submit(submission)
    except JournalError as exc:
        current_app.logger.info("Rejected submission: %s", exc.message_key)
        # The file input comes back empty after a round trip.
        controller.clear_attachment()
        return _render_page(controller, status=400)

    flash(translate("saved"), "success")
    return redirect(url_for("index", lang=get_lang()))


def delete_entry(entry_id: int):
    controller = _build_controller()
    controller.renderer.render_all()
    deleted = controller.delete(entry_id)

    if wants_json():
        return jsonify(
            removed=entry_id,
            deleted=deleted,
            count=len(controller.renderer.visible),
        )
    if deleted:
        flash(translate("deleted"), "success")
    return redirect(url_for("index", lang=get_lang()))


def export_json():
    store = EntryStore(SlotStorage(browser_id()), current_app.config["STORAGE_KEY"])
    resp = Response(store.raw(), mimetype="application/json; charset=utf-8")
    resp.headers["Content-Disposition"] = "attachment; filename=travel-entries.json"
    return resp


def health():
    return {"status": "ok"}


def not_found(error):
    return render_template("error.html", message=translate("not_found")), 404


def too_large(error):
    message = translate(ImageTooLarge.message_key)
    if wants_json():
        return jsonify(error=message), 413
    return render_template("error.html", message=message), 413


def internal_error(error):  # pragma: no cover - delegated to Flask
    db.session.rollback()
    return render_template("error.html", message=translate("server_error")), 500
