#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

import ucaselective.cli as cli
from ucaselective.config import UCASElectiveConfig, filter_course_codes, read_course_list
from ucaselective.environ import Environ
from ucaselective.exceptions import ConfigError


def _write(path, text, encoding="utf-8"):
    with open(path, "w", encoding=encoding) as fp:
        fp.write(text)
    return path


class _ConfigTestBase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.environ = Environ()
        self._saved = (self.environ.config_ini, self.environ.course_list, self.environ.keep_retrying)
        self.environ.config_ini = None
        self.environ.course_list = None
        self.environ.keep_retrying = False

    def tearDown(self):
        (self.environ.config_ini, self.environ.course_list, self.environ.keep_retrying) = self._saved
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def write_config(self, text, name="config.ini"):
        return _write(os.path.join(self.tmpdir, name), text)


class CourseListOfflineTest(_ConfigTestBase):
    def test_filter_course_codes(self):
        codes = filter_course_codes(["123456", "12345", "abc123", "654321"])
        self.assertEqual(codes, ["123456", "654321"])

    def test_filter_rejects_longer_and_padded(self):
        codes = filter_course_codes(["1234567", " 111111 ", "222222 ", "333333\r\n", "", None, "22222a"])
        self.assertEqual(codes, ["333333"])

    def test_read_course_list_bom_crlf(self):
        path = _write(os.path.join(self.tmpdir, "courseList.txt"),
                      "123456\r\n12345\r\nabc123\r\n654321\r\n", encoding="utf-8-sig")
        self.assertEqual(read_course_list(path), ["123456", "654321"])

    def test_get_course_codes_merge_and_dedupe(self):
        _write(os.path.join(self.tmpdir, "courseList.txt"), "123456\n654321\n123456\n")
        path = self.write_config(
            "[user]\nuserName = u\npwd = p\n\n"
            "[course]\ncourse_list = courseList.txt\ncodes = 111111, bad, 654321\n"
        )
        config = UCASElectiveConfig(path)
        self.assertEqual(config.get_course_codes(), ["111111", "654321", "123456"])

    def test_get_course_codes_missing_file(self):
        path = self.write_config("[user]\nuserName = u\npwd = p\n\n[course]\ncourse_list = nope.txt\n")
        with self.assertRaises(ConfigError):
            UCASElectiveConfig(path).get_course_codes()

    def test_get_course_codes_nothing_valid(self):
        _write(os.path.join(self.tmpdir, "courseList.txt"), "abc\n12345\n")
        path = self.write_config("[user]\nuserName = u\npwd = p\n\n[course]\ncourse_list = courseList.txt\n")
        with self.assertRaises(ConfigError):
            UCASElectiveConfig(path).get_course_codes()

    def test_course_list_override(self):
        other = _write(os.path.join(self.tmpdir, "other.txt"), "222222\n")
        path = self.write_config("[user]\nuserName = u\npwd = p\n\n[course]\ncourse_list = courseList.txt\n")
        self.environ.course_list = other
        self.assertEqual(UCASElectiveConfig(path).get_course_codes(), ["222222"])


class ConfigOfflineTest(_ConfigTestBase):
    def test_defaults(self):
        config = UCASElectiveConfig(self.write_config("[user]\nuserName = u\npwd = p\n"))
        self.assertEqual(config.username, "u")
        self.assertEqual(config.password, "p")
        self.assertEqual(config.refresh_interval, 1.0)
        self.assertEqual(config.refresh_random_deviation, 0.0)
        self.assertEqual(config.client_timeout, 10.0)
        self.assertTrue(config.stop_on_terminal)
        self.assertFalse(config.refresh_backoff_enable)
        self.assertFalse(config.is_debug_dump_body)
        config.check_credentials()
        config.check_numbers()

    def test_keep_retrying_overrides(self):
        config = UCASElectiveConfig(self.write_config(
            "[user]\nuserName = u\npwd = p\n\n[client]\nstop_on_terminal = true\n"
        ))
        self.environ.keep_retrying = True
        self.assertFalse(config.stop_on_terminal)

    def test_missing_pwd(self):
        config = UCASElectiveConfig(self.write_config("[user]\nuserName = u\n"))
        with self.assertRaises(ConfigError):
            config.check_credentials()

    def test_blank_username(self):
        config = UCASElectiveConfig(self.write_config("[user]\nuserName =\npwd = p\n"))
        with self.assertRaises(ConfigError):
            config.check_credentials()

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            UCASElectiveConfig(os.path.join(self.tmpdir, "missing.ini"))

    def test_invalid_number(self):
        config = UCASElectiveConfig(self.write_config(
            "[user]\nuserName = u\npwd = p\n\n[client]\nrefresh_interval = fast\n"
        ))
        with self.assertRaises(ConfigError):
            config.check_numbers()

    def test_invalid_boolean(self):
        config = UCASElectiveConfig(self.write_config(
            "[user]\nuserName = u\npwd = p\n\n[client]\nstop_on_terminal = maybe\n"
        ))
        with self.assertRaises(ConfigError):
            config.check_numbers()

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(ConfigError, ValueError))


class StartupConfigErrorOfflineTest(_ConfigTestBase):
    def test_missing_pwd_aborts_before_any_request(self):
        _write(os.path.join(self.tmpdir, "courseList.txt"), "123456\n")
        path = self.write_config("[user]\nuserName = u\n\n[course]\ncourse_list = courseList.txt\n")
        send = mock.Mock(side_effect=AssertionError("network used"))
        with mock.patch("requests.sessions.Session.send", new=send), \
             mock.patch.object(sys, "argv", new=["prog", "-c", path]):
            ret = cli.run()
        self.assertEqual(ret, 1)
        send.assert_not_called()


if __name__ == "__main__":
    unittest.main()
