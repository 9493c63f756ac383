#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: session.py

import time
from requests.utils import dict_from_cookiejar


class Session(object):
    """
    Authentication state shared by every course loop: the accumulated
    cookies plus the two tokens obtained during login.

    A session is either fully authenticated or stale. It starts stale, is
    marked stale at the beginning of every refresh and only becomes
    authenticated again when both tokens are committed together.
    """

    def __init__(self):
        self.cookies = {}
        self.identity_token = None
        self.management_token = None
        self.generation = 0
        self.authenticated_at = None
        self._stale = True

    @property
    def is_stale(self):
        return self._stale

    @property
    def is_authenticated(self):
        return (not self._stale
                and bool(self.identity_token)
                and bool(self.management_token))

    def mark_stale(self):
        self._stale = True

    def replace_cookies(self, r):
        self.cookies = {}
        self.merge_cookies(r)

    def merge_cookies(self, r):
        # cookies set by redirect responses are kept too
        for resp in list(r.history) + [r]:
            self.cookies.update(dict_from_cookiejar(resp.cookies))

    def commit(self, identity_token, management_token):
        self.identity_token = identity_token
        self.management_token = management_token
        self.generation += 1
        self.authenticated_at = time.time()
        self._stale = False

    def __repr__(self):
        return "<Session generation=%d stale=%s cookies=%s>" % (
            self.generation, self._stale, sorted(self.cookies))
