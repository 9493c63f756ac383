#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: sep.py

from .client import BaseClient
from .hook import _hooks_check_status_code
from .const import SEPURL


class SEPClient(BaseClient):
    """ 中国科学院大学 SEP 门户 """

    def slogin(self, username, password, **kwargs):
        headers = kwargs.pop("headers", {})
        headers["Origin"] = SEPURL.Root
        headers["Referer"] = SEPURL.Root + "/"
        r = self._post(
            url=SEPURL.Login,
            data={
                "userName": username,
                "pwd": password,
                "sb": "sb",
            },
            headers=headers,
            hooks=_hooks_check_status_code,
            **kwargs,
        )
        return r

    def get_identity_portal(self, **kwargs):
        r = self._get(
            url=SEPURL.IdentityPortal,
            hooks=_hooks_check_status_code,
            **kwargs,
        )
        return r
