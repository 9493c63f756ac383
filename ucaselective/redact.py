#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Masking of secrets in response bodies before they reach a log file.

Bodies of the portal pages carry the identity token, the management id and
sometimes the session cookie, none of which should end up in a log that is
shared when reporting a problem.
"""

from __future__ import annotations

import re


_RE_IDENTITY = re.compile(r"(?i)(Identity=)([0-9A-Za-z\-]+)")
_RE_MANAGE_ID = re.compile(r"(selectCourse\?s=)([0-9A-Za-z\-]+)")
_RE_S_PARAM = re.compile(r"([?&]s=)([0-9A-Za-z\-]{8,})")
_RE_JSESSIONID = re.compile(r"(?i)(JSESSIONID=)([^;\s&\"']+)")
_RE_SESSION_COOKIE = re.compile(r"(?i)(sepuser=)([^;\s&\"']+)")


def sanitize_text(text: str | None, username: str | None = None) -> str:
    if text is None:
        return ""
    s = str(text)

    if username:
        s = s.replace(username, "USERNAME")

    s = _RE_IDENTITY.sub(r"\1IDENTITY", s)
    s = _RE_MANAGE_ID.sub(r"\1MANAGE_ID", s)
    s = _RE_S_PARAM.sub(r"\1MANAGE_ID", s)
    s = _RE_JSESSIONID.sub(r"\1JSESSIONID", s)
    s = _RE_SESSION_COOKIE.sub(r"\1SEPUSER", s)
    return s


def mask_token(token: str | None, keep: int = 4) -> str:
    """
    Shorten a token to its first characters for console output.
    """
    if not token:
        return ""
    if len(token) <= keep:
        return "*" * len(token)
    return token[:keep] + "*" * (len(token) - keep)
