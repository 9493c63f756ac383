#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: classifier.py

from __future__ import annotations

from enum import Enum
from typing import Optional

from .const import (
    MARKER_SUCCESS,
    MARKER_SESSION_EXPIRED,
    MARKER_CAPACITY_FULL,
    MARKER_TIME_WINDOW_CLOSED,
    MARKER_NOT_AUTHORIZED,
    MARKER_SCHEDULE_CONFLICT,
)


class Verdict(Enum):
    """
    Outcome of one saveCourse response. Members are declared in matching
    priority: the first member whose marker occurs in the body wins.
    """

    SUCCESS = (MARKER_SUCCESS, True, "选课成功...")
    SESSION_EXPIRED = (MARKER_SESSION_EXPIRED, False, "重新登录...")
    CAPACITY_FULL = (MARKER_CAPACITY_FULL, False, "捡漏中...")
    TIME_WINDOW_CLOSED = (MARKER_TIME_WINDOW_CLOSED, False, "当前时间不在选课有效时间内...")
    NOT_AUTHORIZED = (MARKER_NOT_AUTHORIZED, False, "未开通选课权限...")
    SCHEDULE_CONFLICT = (MARKER_SCHEDULE_CONFLICT, True, "上课时间冲突...")
    UNKNOWN = (None, False, "未知响应...")

    def __init__(self, marker: Optional[str], terminal: bool, message: str):
        self.marker = marker
        self.terminal = terminal
        self.message = message

    @property
    def is_terminal(self) -> bool:
        return self.terminal

    @property
    def needs_login(self) -> bool:
        return self is Verdict.SESSION_EXPIRED


def classify(body: Optional[str]) -> Verdict:
    text = body or ""
    for verdict in Verdict:
        if verdict.marker is not None and verdict.marker in text:
            return verdict
    return Verdict.UNKNOWN
