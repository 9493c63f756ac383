#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: utils.py

import os
import threading


class Singleton(type):
    """
    Singleton Metaclass
    @link https://github.com/jhao104/proxy_pool/blob/428359c8dada998481f038dbdc8d3923e5850c0e/Util/utilClass.py
    """
    _inst = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._inst:
            with cls._lock:
                if cls not in cls._inst:
                    cls._inst[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._inst[cls]


def mkdir(path):
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)
