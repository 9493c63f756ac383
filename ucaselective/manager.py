#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: manager.py

from .environ import Environ
from .logger import ConsoleLogger, FileLogger
from .sep import SEPClient
from .jwxk import JWXKClient
from .parser import get_identity, get_manage_id
from .redact import sanitize_text, mask_token
from .const import MARKER_STUDENT_ROLE
from .exceptions import (
    TransportError,
    AuthenticationError,
    IdentityNotFoundError,
    RoleVerificationError,
    ManagementIdNotFoundError,
)

environ = Environ()
cout = ConsoleLogger("manager")
ferr = FileLogger("manager.error")


class SessionManager(object):
    """
    Runs the login handshake that turns credentials into an authenticated
    ``Session``:

    1. SEP login with username / password, its cookies become the base set
    2. SEP portal page, which links to the course system with an Identity token
    3. course system login with that Identity, must land on the student role
    4. course manage page, which carries the management id used by saveCourse

    Every step merges its cookies into the session before the next one runs.
    A failed step raises an ``AuthenticationError`` subclass and leaves the
    session stale with the cookies gathered so far. Callers must serialize
    ``refresh`` with every other use of the session.
    """

    def __init__(self, username, password, sep=None, jwxk=None, timeout=None):
        self._username = username
        self._password = password
        kwargs = {} if timeout is None else {"timeout": timeout}
        self._sep = sep if sep is not None else SEPClient(**kwargs)
        self._jwxk = jwxk if jwxk is not None else JWXKClient(**kwargs)

    @property
    def username(self):
        return self._username

    def refresh(self, session):
        session.mark_stale()
        cout.info("Try to login SEP (user: %s)" % self._username)
        try:
            identity = self._login(session)
            self._identity_login(session, identity)
            manage_id = self._get_manage_id(session)
        except TransportError as e:
            ferr.error(e)
            raise AuthenticationError(
                msg="Login interrupted by transport failure: %s" % e,
                response=e.response,
            ) from e
        session.commit(identity, manage_id)
        environ.incr("login_count")
        cout.info("Login success (generation: %d, student_id: %s)"
                  % (session.generation, mask_token(manage_id)))
        return session

    def _login(self, session):
        r = self._sep.slogin(self._username, self._password)
        session.replace_cookies(r)

        r = self._sep.get_identity_portal(cookies=dict(session.cookies))
        session.merge_cookies(r)

        identity = get_identity(r.text)
        if identity is None:
            self._dump_body("identity", r)
            raise IdentityNotFoundError(response=r)
        cout.info("identity: %s" % mask_token(identity))
        return identity

    def _identity_login(self, session, identity):
        r = self._jwxk.identity_login(identity, cookies=dict(session.cookies))
        session.merge_cookies(r)
        if MARKER_STUDENT_ROLE not in r.text:
            self._dump_body("identity_login", r)
            raise RoleVerificationError(response=r)

    def _get_manage_id(self, session):
        r = self._jwxk.get_course_manage_main(cookies=dict(session.cookies))
        session.merge_cookies(r)
        manage_id = get_manage_id(r.text)
        if manage_id is None:
            self._dump_body("manage", r)
            raise ManagementIdNotFoundError(response=r)
        return manage_id

    def _dump_body(self, step, r):
        ferr.error("Unexpected %s page (%s):\n%s"
                   % (step, r.url, sanitize_text(r.text, self._username)))
