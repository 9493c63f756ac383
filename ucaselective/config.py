#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: config.py

import os
import re
from configparser import RawConfigParser, Error as ConfigParserError
from collections import OrderedDict
from .environ import Environ
from .const import DEFAULT_CONFIG_INI, DEFAULT_COURSE_LIST, BASE_DIR
from .exceptions import ConfigError

_reCommaSep = re.compile(r'\s*,\s*')
_reCourseCode = re.compile(r'^[0-9]{6}$')

environ = Environ()


class BaseConfig(object):

    def __init__(self, config_file=None):
        if self.__class__ is __class__:
            raise NotImplementedError
        file = os.path.normpath(os.path.abspath(config_file))
        if not os.path.exists(file):
            raise ConfigError("Config file was not found: %s" % file)
        self._file = file
        self._config = RawConfigParser()
        try:
            self._config.read(file, encoding="utf-8-sig")
        except ConfigParserError as e:
            raise ConfigError("Malformed config file %s: %s" % (file, e)) from e

    @property
    def file(self):
        return self._file

    def get(self, section, key):
        try:
            return self._config.get(section, key)
        except ConfigParserError as e:
            raise ConfigError("Missing %s.%s in %s" % (section, key, self._file)) from e

    def get_optional(self, section, key, default=None):
        if self._config.has_option(section, key):
            return self._config.get(section, key)
        return default

    def get_optional_float(self, section, key, default):
        v = self.get_optional(section, key)
        if v is None or v.strip() == "":
            return default
        try:
            return float(v)
        except ValueError:
            raise ConfigError("Invalid number for %s.%s: %r" % (section, key, v))

    def get_optional_int(self, section, key, default):
        v = self.get_optional(section, key)
        if v is None or v.strip() == "":
            return default
        try:
            return int(v)
        except ValueError:
            raise ConfigError("Invalid integer for %s.%s: %r" % (section, key, v))

    def get_optional_bool(self, section, key, default=False):
        if not self._config.has_option(section, key):
            return default
        try:
            return self._config.getboolean(section, key)
        except ValueError:
            raise ConfigError("Invalid boolean for %s.%s" % (section, key))

    def get_optional_list(self, section, key, default=None):
        if not self._config.has_option(section, key):
            return default if default is not None else []
        v = self._config.get(section, key)
        if v is None or v.strip() == "":
            return []
        return _reCommaSep.split(v.strip())


class UCASElectiveConfig(BaseConfig):

    def __init__(self, config_file=None):
        super().__init__(config_file or environ.config_ini or DEFAULT_CONFIG_INI)

    ## Model

    # [user]

    @property
    def username(self):
        return self.get("user", "userName")

    @property
    def password(self):
        return self.get("user", "pwd")

    # [course]

    @property
    def course_list_file(self):
        file = environ.course_list or self.get_optional("course", "course_list")
        if file is None or file.strip() == "":
            return DEFAULT_COURSE_LIST
        file = file.strip()
        if not os.path.isabs(file):
            file = os.path.join(os.path.dirname(self.file) or BASE_DIR, file)
        return os.path.normpath(file)

    @property
    def inline_course_codes(self):
        return self.get_optional_list("course", "codes")

    # [client]

    @property
    def refresh_interval(self):
        return max(0.0, self.get_optional_float("client", "refresh_interval", 1.0))

    @property
    def refresh_random_deviation(self):
        return max(0.0, self.get_optional_float("client", "random_deviation", 0.0))

    @property
    def client_timeout(self):
        return self.get_optional_float("client", "client_timeout", 10.0)

    @property
    def stop_on_terminal(self):
        if environ.keep_retrying:
            return False
        return self.get_optional_bool("client", "stop_on_terminal", True)

    @property
    def refresh_backoff_enable(self):
        return self.get_optional_bool("client", "refresh_backoff_enable", False)

    @property
    def refresh_backoff_factor(self):
        return max(1.0, self.get_optional_float("client", "refresh_backoff_factor", 1.6))

    @property
    def refresh_backoff_max(self):
        return max(0.0, self.get_optional_float("client", "refresh_backoff_max", 60.0))

    @property
    def refresh_backoff_threshold(self):
        return max(1, self.get_optional_int("client", "refresh_backoff_threshold", 2))

    @property
    def is_debug_dump_body(self):
        return self.get_optional_bool("client", "debug_dump_body", False)

    ## Method

    def check_credentials(self):
        for key, value in (("userName", self.username), ("pwd", self.password)):
            if value is None or value.strip() == "":
                raise ConfigError("user.%s must not be empty in %s" % (key, self.file))

    def check_numbers(self):
        if self.client_timeout <= 0:
            raise ConfigError("client.client_timeout must be positive, not %s" % self.client_timeout)
        for name in ("refresh_interval", "refresh_random_deviation", "stop_on_terminal",
                     "refresh_backoff_enable", "refresh_backoff_factor", "refresh_backoff_max",
                     "refresh_backoff_threshold", "is_debug_dump_body"):
            getattr(self, name)  # bad values fail here, before startup

    def get_course_codes(self):
        codes = filter_course_codes(self.inline_course_codes)
        file = self.course_list_file
        if os.path.exists(file):
            codes.extend(read_course_list(file))
        elif not codes:
            raise ConfigError("Course list file was not found: %s" % file)
        codes = list(OrderedDict.fromkeys(codes))
        if not codes:
            raise ConfigError("No valid 6-digit course code in %s" % file)
        return codes


def filter_course_codes(lines):
    """
    Keep the lines that are exactly a 6-digit course code, in input order.
    Only line terminators are removed, so padded lines do not match.
    Anything else is dropped silently.
    """
    codes = []
    for line in lines:
        if line is None:
            continue
        s = line.rstrip("\r\n")
        if _reCourseCode.match(s):
            codes.append(s)
    return codes


def read_course_list(file):
    try:
        with open(file, "r", encoding="utf-8-sig") as fp:
            return filter_course_codes(fp.read().splitlines())
    except OSError as e:
        raise ConfigError("Unable to read course list %s: %s" % (file, e)) from e
