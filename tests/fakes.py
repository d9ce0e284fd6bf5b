"""Canned portal pages and a recording mock portal for tests."""

from __future__ import annotations

from typing import Optional
from urllib.parse import parse_qsl

import httpx

from time_recorder.portal.session import PortalSession

PORTAL_URL = "https://portal.example.jp/"

CSRF_KEY = "__sectag_4f2a9c"
CSRF_VALUE = "0123456789abcdef"


def _button(label: str, time: Optional[str]) -> str:
    if time is None:
        return f'<button type="submit" class="btn">{label}</button>'
    return f'<button type="submit" class="btn disabled">{label}<br />({time})</button>'


def make_page(
    *,
    authorized: bool = True,
    start: Optional[str] = None,
    leave: Optional[str] = None,
    csrf: Optional[tuple[str, str]] = (CSRF_KEY, CSRF_VALUE),
) -> str:
    """Render a page shaped like the portal's top page."""
    user = '<div class="user_name">山田 太郎 さん</div>' if authorized else ""
    login = "" if authorized else '<form name="login"><input name="y_logincd"></form>'
    token = f'<input type="hidden" name="{csrf[0]}" value="{csrf[1]}">' if csrf else ""
    return f"""<!DOCTYPE html>
<html lang="ja">
<head><meta charset="UTF-8"><title>勤怠管理</title></head>
<body>
<div id="header">{user}</div>
{login}
<form method="post" action="/" id="timerecorder">
  {token}
  <input type="hidden" name="module" value="timerecorder">
  <div class="recorder">
    {_button("出社", start)}
    {_button("退社", leave)}
  </div>
</form>
</body>
</html>"""


class FakePortal:
    """Serves canned pages in order and records every form posted to it."""

    def __init__(self, *pages: str, cookie: str = "PHPSESSID=s3ss10n"):
        self.pages = list(pages)
        self.cookie = cookie
        self.requests: list[httpx.Request] = []
        self.sessions_created = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.pages:
            raise AssertionError("unexpected request to portal")
        headers = {"Set-Cookie": f"{self.cookie}; Path=/"} if len(self.requests) == 1 else {}
        # Portal answers 200 whether or not the login worked.
        return httpx.Response(200, text=self.pages.pop(0), headers=headers)

    def session(self) -> PortalSession:
        self.sessions_created += 1
        return PortalSession(base_url=PORTAL_URL, transport=httpx.MockTransport(self.handler))

    @property
    def forms(self) -> list[list[tuple[str, str]]]:
        return [parse_qsl(r.content.decode()) for r in self.requests]

    @property
    def stamp_forms(self) -> list[dict[str, str]]:
        return [dict(f) for f in self.forms if dict(f).get("module") == "timerecorder"]
