"""Simple localisation helpers used across templates and routes."""
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Optional

from flask import current_app, has_request_context, request, session


STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "app_title": "Travel Journal",
        "city": "City",
        "date": "Date",
        "memo": "Memo",
        "photo": "Photo",
        "choose_photo": "Attach a photo",
        "photo_selected": "Selected: {name}",
        "add_entry": "Add to journal",
        "submitting": "Saving...",
        "delete": "Delete",
        "lang": "Language",
        "no_entries": "No trips recorded yet.",
        "export": "Export JSON",
        "saved": "Entry saved",
        "deleted": "Entry deleted",
        "not_found": "Page not found",
        "server_error": "Something went wrong",
        "back": "Back",
        "error_generic": "The entry could not be saved.",
        "error_required": "Please enter a city and a date.",
        "error_image_too_large": "The photo must be 5 MB or smaller.",
        "error_image_invalid": "The photo could not be read.",
        "warning_storage_corrupt": "Saved entries could not be read and were skipped.",
    },
    "ko": {
        "app_title": "여행 일지",
        "city": "도시",
        "date": "날짜",
        "memo": "메모",
        "photo": "사진",
        "choose_photo": "사진 첨부",
        "photo_selected": "선택됨: {name}",
        "add_entry": "일지 추가",
        "submitting": "저장 중...",
        "delete": "삭제",
        "lang": "언어",
        "no_entries": "아직 기록된 여행이 없습니다.",
        "export": "JSON 내보내기",
        "saved": "저장되었습니다",
        "deleted": "삭제되었습니다",
        "not_found": "페이지를 찾을 수 없습니다",
        "server_error": "문제가 발생했습니다",
        "back": "돌아가기",
        "error_generic": "항목을 저장하지 못했습니다.",
        "error_required": "도시와 날짜를 입력해주세요.",
        "error_image_too_large": "사진은 5MB 이하만 첨부할 수 있습니다.",
        "error_image_invalid": "사진을 읽을 수 없습니다.",
        "warning_storage_corrupt": "저장된 기록을 읽을 수 없어 건너뛰었습니다.",
    },
}

MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _default_lang() -> str:
    return current_app.config.get("DEFAULT_LANG", "ko")


def get_lang() -> str:
    lang = request.args.get("lang") or session.get("lang") or _default_lang()
    if lang not in STRINGS:
        lang = "en"
    session["lang"] = lang
    return lang


def translate(key: str, lang: Optional[str] = None) -> str:
    if lang is None:
        lang = get_lang() if has_request_context() else "en"
    return STRINGS.get(lang, STRINGS["en"]).get(key, key)


def format_entry_date(value: str, lang: str) -> str:
    """Render a ``YYYY-MM-DD`` value for display; unknown formats pass through."""
    try:
        parsed = date.fromisoformat(value)
    except (TypeError, ValueError):
        return value
    if lang == "ko":
        return f"{parsed.year}년 {parsed.month}월 {parsed.day}일"
    return f"{MONTHS_EN[parsed.month - 1]} {parsed.day}, {parsed.year}"


def context_processor():
    """Context processor injecting translation helpers into templates."""
    return {
        "t": translate,
        "lang": get_lang(),
        "languages": sorted(STRINGS),
        "current_year": datetime.utcnow().year,
    }
