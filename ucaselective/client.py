#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: client.py

from http.cookiejar import DefaultCookiePolicy
import requests
from requests.exceptions import RequestException
from .const import USER_AGENT
from .exceptions import TransportError


class BaseClient(object):
    """
    Thin wrapper over ``requests.Session``. The underlying session keeps
    connection pools and default headers only: cookies belong to the caller
    and are passed in on every request.
    """

    default_headers = {
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Encoding": "gzip, deflate",
        "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
        "Connection": "keep-alive",
        "User-Agent": USER_AGENT,
    }
    default_client_timeout = 10

    def __init__(self, *args, **kwargs):
        if self.__class__ is __class__:
            raise NotImplementedError
        self._timeout = kwargs.get("timeout", self.__class__.default_client_timeout)
        self._session = requests.Session()
        self._session.headers.update(self.__class__.default_headers)
        self._session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    def _request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self._timeout)
        try:
            return self._session.request(method, url, **kwargs)
        except RequestException as e:
            raise TransportError(msg="%s %s: %s" % (method, url, e)) from e

    def _get(self, url, params=None, **kwargs):
        return self._request('GET', url, params=params, **kwargs)

    def _post(self, url, data=None, **kwargs):
        return self._request('POST', url, data=data, **kwargs)

    def close(self):
        self._session.close()
