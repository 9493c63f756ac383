#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: jwxk.py

from .client import BaseClient
from .hook import _hooks_check_status_code, _hooks_with_etree
from .const import JWXKURL, SEPURL


class JWXKClient(BaseClient):
    """ 中国科学院大学 教务选课系统 """

    def identity_login(self, identity, **kwargs):
        headers = kwargs.pop("headers", {})
        headers["Referer"] = SEPURL.IdentityPortal
        r = self._get(
            url=JWXKURL.IdentityLogin,
            params={
                "Identity": identity,
            },
            headers=headers,
            hooks=_hooks_check_status_code,
            **kwargs,
        )
        return r

    def get_course_manage_main(self, **kwargs):
        r = self._get(
            url=JWXKURL.CourseManageMain,
            hooks=_hooks_check_status_code,
            **kwargs,
        )
        return r

    def save_course(self, sids, s, **kwargs):
        headers = kwargs.pop("headers", {})
        headers["Origin"] = JWXKURL.Root
        headers["Referer"] = JWXKURL.CourseManageMain
        r = self._post(
            url=JWXKURL.SaveCourse,
            data={
                "sids": sids,
                "s": s,
            },
            headers=headers,
            hooks=_hooks_with_etree,
            **kwargs,
        )
        return r
