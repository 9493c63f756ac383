#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: gate.py

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from datetime import datetime

from .logger import ConsoleLogger, FileLogger
from .classifier import Verdict, classify
from .parser import get_title, get_text
from .redact import sanitize_text
from .const import TIME_FORMAT, WEB_LOG_DIR
from .exceptions import AuthenticationError
from .utils import mkdir

cout = ConsoleLogger("gate")
ferr = FileLogger("gate.error")


@dataclass(frozen=True)
class Attempt:
    course_code: str
    count: int
    time: datetime
    verdict: Verdict

    def format(self) -> str:
        return "sid:[%s]\tcount:[%d]\ttime:[%s]:%s" % (
            self.course_code,
            self.count,
            self.time.strftime(TIME_FORMAT),
            self.verdict.message,
        )


class SubmissionGate(object):
    """
    The only place where the shared session is used. ``submit`` holds the
    lock for the whole unit of work: the saveCourse request, and when the
    server asks for it, the full re-login. No other course loop can send
    anything in between, so nobody ever submits with a half refreshed
    session.
    """

    def __init__(self, session, manager, client, dump_body=False):
        self._session = session
        self._manager = manager
        self._client = client
        self._dump_body = dump_body
        self._lock = threading.RLock()

    @property
    def session(self):
        return self._session

    def authenticate(self):
        with self._lock:
            return self._manager.refresh(self._session)

    def submit(self, course_code: str, count: int) -> Attempt:
        with self._lock:
            if not self._session.is_authenticated:
                cout.info("Session is stale, login before submitting %s" % course_code)
                self._manager.refresh(self._session)

            now = datetime.now()
            r = self._client.save_course(
                course_code,
                self._session.management_token,
                cookies=dict(self._session.cookies),
            )
            self._session.merge_cookies(r)

            attempt = Attempt(course_code, count, now, classify(r.text))
            self._log_attempt(attempt, r)

            if attempt.verdict.needs_login:
                try:
                    self._manager.refresh(self._session)
                except AuthenticationError as e:
                    ferr.error(e)
                    cout.warning("Re-login failed, retry on next attempt")

            return attempt

    def _log_attempt(self, attempt, r):
        line = attempt.format()
        if attempt.verdict is Verdict.UNKNOWN:
            tree = getattr(r, "_tree", None)
            cout.warning("%s %s" % (line, get_title(tree) or get_text(tree)))
            ferr.warning("%s\n%s" % (line, sanitize_text(r.text, self._manager.username)))
        else:
            cout.info(line)
        if self._dump_body:
            self._dump_response(attempt, r)

    def _dump_response(self, attempt, r):
        mkdir(WEB_LOG_DIR)
        filename = "%s.%s.%d.html" % (
            attempt.course_code,
            attempt.time.strftime("%Y%m%d%H%M%S"),
            attempt.count,
        )
        with open(os.path.join(WEB_LOG_DIR, filename), "w", encoding="utf-8") as fp:
            fp.write(sanitize_text(r.text, self._manager.username))
