#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: parser.py

import re
from lxml import etree

_regexIdentity = re.compile(r'http://jwxk\.ucas\.ac\.cn/login\?Identity=([0-9A-Za-z\-]+)')
_regexManageId = re.compile(r'/courseManage/selectCourse\?s=([0-9A-Za-z\-]+)')
_regexBlank = re.compile(r'\s+')


def get_tree_from_response(r):
    return get_tree(r.text) # 不要用 r.content, 否则可能会以 latin-1 编码

def get_tree(content):
    if content is None or content.strip() == "":
        return None
    try:
        return etree.HTML(content)
    except (etree.ParserError, ValueError):
        return None

def get_title(tree):
    if tree is None:
        return None
    title = tree.find('.//head/title')
    if title is None:
        return None
    return title.text

def get_text(tree, limit=200):
    """
    Visible text of a page, whitespace collapsed, for one-line log messages.
    """
    if tree is None:
        return ""
    for bad in tree.xpath('.//script | .//style'):
        parent = bad.getparent()
        if parent is not None:
            parent.remove(bad)
    text = _regexBlank.sub(" ", "".join(tree.xpath('string()'))).strip()
    if limit is not None and len(text) > limit:
        text = text[:limit] + "..."
    return text

def get_identity(text):
    m = _regexIdentity.search(text or "")
    if m is None:
        return None
    return m.group(1)

def get_manage_id(text):
    m = _regexManageId.search(text or "")
    if m is None:
        return None
    return m.group(1)
