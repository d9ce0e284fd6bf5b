"""Yorozuya portal URLs, form fields, page markers, and extraction patterns."""

import re

# ── URLs ─────────────────────────────────────────────────────────────────────

YOROZUYA_BASE = "https://www.e4628.jp"

# ── Request Headers ──────────────────────────────────────────────────────────

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/131.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
}

# ── Login Form ───────────────────────────────────────────────────────────────

LOGIN_COMPANY_FIELD = "y_companycd"
LOGIN_USER_FIELD = "y_logincd"
LOGIN_PASSWORD_FIELD = "password"

LOGIN_STATIC_FIELDS = {
    "Submit": "Login",
    "module": "login",
    "trycnt": "1",
}

# ── Time Recorder Form ───────────────────────────────────────────────────────

STAMP_STATIC_FIELDS = {
    "module": "timerecorder",
    "action": "timerecorder",
}
STAMP_TYPE_FIELD = "timerecorder_stamping_type"

# ── Page Markers ─────────────────────────────────────────────────────────────

# Only rendered for a logged-in user; the portal answers 200 either way.
AUTHORIZED_MARKER = '<div class="user_name">'

CSRF_PATTERN = re.compile(r'name="(__sectag_[0-9a-f]+)" value="([0-9a-f]+)"')
CSRF_NAME_PATTERN = re.compile(r"^__sectag_[0-9a-f]+$")
CSRF_VALUE_PATTERN = re.compile(r"^[0-9a-f]+$")

# 出社 = clocked in, 退社 = clocked out; the time follows on the next line.
START_TIME_PATTERN = re.compile(r">出社<br\s*/?>\((\d{2}:\d{2})\)")
LEAVE_TIME_PATTERN = re.compile(r">退社<br\s*/?>\((\d{2}:\d{2})\)")

# ── Response Messages ────────────────────────────────────────────────────────

MSG_OK = "OK"
MSG_INVALID_BODY = "invalid request body"
MSG_INTERNAL_ERROR = "Internal server error"
MSG_ALREADY_LEFT = "本日は退勤済みです"
MSG_UNKNOWN_STATE = "unknown state: buttons not found"
MSG_NOT_FOUND = "Endpoint not found"
