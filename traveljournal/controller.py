"""Form handling for new journal entries and the per-entry delete flow."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import MIB
from .errors import JournalError, MissingRequiredField
from .models import Entry
from .render import ListRenderer
from .services.entries import EntryStore
from .services.images import encode_image

logger = logging.getLogger(__name__)


@dataclass
class Submission:
    city: str = ""
    date: str = ""
    memo: str = ""
    image: Any = None

    def has_image(self) -> bool:
        # Browsers send an empty part with no filename when nothing is chosen.
        return self.image is not None and bool(getattr(self.image, "filename", True))


@dataclass
class FormState:
    city: str = ""
    date: str = ""
    memo: str = ""
    attachment: Optional[str] = None
    error: Optional[JournalError] = None

    @property
    def error_visible(self) -> bool:
        return self.error is not None

    def show_error(self, error: JournalError) -> None:
        self.error = error

    def clear_error(self) -> None:
        self.error = None

    def reset(self) -> None:
        self.city = self.date = self.memo = ""
        self.attachment = None


class FormController:
    def __init__(
        self,
        store: EntryStore,
        renderer: ListRenderer,
        *,
        max_image_bytes: int = 5 * MIB,
        max_image_side: int = 0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.renderer = renderer
        self.max_image_bytes = max_image_bytes
        self.max_image_side = max_image_side
        self.clock = clock
        self.form = FormState()
        if renderer.on_delete is None:
            renderer.on_delete = self.delete

    def select_attachment(self, filename: Optional[str]) -> None:
        self.form.attachment = filename or None

    def clear_attachment(self) -> None:
        self.form.attachment = None

    def submit(self, submission: Submission) -> Entry:
        """Validate, persist and render a new entry.

        On failure the error is shown on ``self.form``, re-raised, and
        neither the store nor the visible list is touched.
        """
        city = (submission.city or "").strip()
        entry_date = (submission.date or "").strip()
        memo = (submission.memo or "").strip()
        self.form.city, self.form.date, self.form.memo = city, entry_date, memo
        if submission.has_image():
            self.select_attachment(getattr(submission.image, "filename", None))

        try:
            if not city or not entry_date:
                raise MissingRequiredField("city and date are required")
            image = None
            if submission.has_image():
                image = encode_image(
                    submission.image, self.max_image_bytes, self.max_image_side
                )
        except JournalError as exc:
            self.form.show_error(exc)
            raise
        self.form.clear_error()

        entry = Entry(
            id=self.store.next_id(int(self.clock() * 1000)),
            city=city,
            date=entry_date,
            memo=memo,
            image=image,
        )
        self.store.add(entry)
        self.renderer.render_one(entry)
        logger.info("Added entry %s (%s, %s)", entry.id, entry.city, entry.date)

        self.form.reset()
        return entry

    def delete(self, entry_id: int) -> bool:
        """Remove an entry from storage, then drop its node from the list."""
        removed = self.store.remove(entry_id)
        dropped = self.renderer.visible.remove(entry_id)
        if removed:
            logger.info("Deleted entry %s", entry_id)
        return removed or dropped
