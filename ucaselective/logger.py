#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: logger.py

import os
import logging
from logging.handlers import TimedRotatingFileHandler
from .const import ERROR_LOG_DIR
from .utils import mkdir


class BaseLogger(object):

    default_level = logging.DEBUG

    def __init__(self, name, level=None):
        if self.__class__ is __class__:
            raise NotImplementedError
        self._name = name
        self._level = level if level is not None else self.__class__.default_level
        self._logger = logging.getLogger(self._name)
        self._logger.setLevel(self._level)
        self._logger.propagate = False
        if not self._logger.handlers:
            self._logger.addHandler(self._get_handler())

    @property
    def name(self):
        return self._name

    @property
    def level(self):
        return self._level

    @property
    def handlers(self):
        return self._logger.handlers

    def _get_handler(self):
        raise NotImplementedError

    def log(self, level, msg, *args, **kwargs):
        return self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg, *args, **kwargs):
        return self._logger.debug(msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        return self._logger.info(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        return self._logger.warning(msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        return self._logger.error(msg, *args, **kwargs)

    def exception(self, msg, *args, exc_info=True, **kwargs):
        return self._logger.exception(msg, *args, exc_info=exc_info, **kwargs)

    def critical(self, msg, *args, **kwargs):
        return self._logger.critical(msg, *args, **kwargs)


class ConsoleLogger(BaseLogger):
    """ 控制台日志输出类 """

    default_level = logging.DEBUG

    _formatter = logging.Formatter(
        fmt="[%(levelname)s] %(name)s, %(asctime)s, %(message)s",
        datefmt="%H:%M:%S",
    )

    def _get_handler(self):
        handler = logging.StreamHandler()
        handler.setLevel(self.level)
        handler.setFormatter(self.__class__._formatter)
        return handler


class FileLogger(BaseLogger):
    """ 文件日志输出类，同时输出到控制台 """

    default_level = logging.WARNING

    _formatter = logging.Formatter(
        fmt="[%(levelname)s] %(name)s, %(asctime)s, %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    def __init__(self, name, level=None):
        super().__init__(name, level)
        if len(self._logger.handlers) == 1:
            console = logging.StreamHandler()
            console.setLevel(self.level)
            console.setFormatter(ConsoleLogger._formatter)
            self._logger.addHandler(console)

    def _get_handler(self):
        mkdir(ERROR_LOG_DIR)
        file = os.path.join(ERROR_LOG_DIR, "%s.log" % self.name)
        handler = TimedRotatingFileHandler(file, when='d', interval=1, encoding="utf-8-sig", delay=True)
        handler.setLevel(self.level)
        handler.setFormatter(self.__class__._formatter)
        return handler
