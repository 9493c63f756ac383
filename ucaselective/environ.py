#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: environ.py

import threading
from collections import defaultdict
from .utils import Singleton


class Environ(object, metaclass=Singleton):

    def __init__(self):
        self.config_ini = None
        self.course_list = None
        self.keep_retrying = False
        self.submit_loop = 0
        self.login_count = 0
        self.errors = defaultdict(lambda: 0)
        self.course_threads = {}
        self._lock = threading.Lock()

    def incr(self, attr):
        with self._lock:
            setattr(self, attr, getattr(self, attr) + 1)

    def add_error(self, e):
        with self._lock:
            self.errors[e.__class__.__name__] += 1
