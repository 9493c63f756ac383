#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: hook.py

from .parser import get_tree_from_response
from .exceptions import StatusCodeError, ServerError


def get_hooks(*fn):
    return {"response": fn}


def merge_hooks(*hooklist):
    fns = []
    for hooks in hooklist:
        fns.extend(hooks["response"])
    return get_hooks(*fns)


def check_status_code(r, **kwargs):
    # hooks run on every hop, redirects are followed by requests itself
    if r.is_redirect:
        return
    if r.status_code != 200:
        if r.status_code in (500, 501, 502, 503, 504):
            raise ServerError(response=r, msg="%s %s (%s)" % (r.status_code, r.reason, r.url))
        raise StatusCodeError(response=r, msg="%s %s (%s)" % (r.status_code, r.reason, r.url))


def with_etree(r, **kwargs):
    r._tree = get_tree_from_response(r)


_hooks_check_status_code = get_hooks(check_status_code)
_hooks_with_etree = merge_hooks(_hooks_check_status_code, get_hooks(with_etree))
