#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: const.py

import os

_abspath = lambda *p: os.path.abspath(os.path.join(*p))

BASE_DIR = _abspath(os.path.dirname(__file__), "../")
LOG_DIR = _abspath(BASE_DIR, "log/")
ERROR_LOG_DIR = _abspath(LOG_DIR, "error/")
WEB_LOG_DIR = _abspath(LOG_DIR, "web/")

DEFAULT_CONFIG_INI = _abspath(BASE_DIR, "config.ini")
DEFAULT_COURSE_LIST = _abspath(BASE_DIR, "courseList.txt")

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class SEPURL(object):

    Host = "sep.ucas.ac.cn"
    Scheme = "http"
    Root = "%s://%s" % (Scheme, Host)

    Login = "%s/slogin" % Root
    IdentityPortal = "%s/portal/site/226/821" % Root


class JWXKURL(object):

    Host = "jwxk.ucas.ac.cn"
    Scheme = "http"
    Root = "%s://%s" % (Scheme, Host)

    IdentityLogin = "%s/login" % Root
    CourseManageMain = "%s/courseManage/main" % Root
    SaveCourse = "%s/courseManage/saveCourse" % Root


# body markers, the order here is the classification priority
MARKER_SUCCESS = "选课成功"
MARKER_SESSION_EXPIRED = "重新登录"
MARKER_CAPACITY_FULL = "超过限选人数"
MARKER_TIME_WINDOW_CLOSED = "当前时间不在选课有效时间内"
MARKER_NOT_AUTHORIZED = "未开通选课权限"
MARKER_SCHEDULE_CONFLICT = "上课时间冲突"

MARKER_STUDENT_ROLE = "学生角色"
