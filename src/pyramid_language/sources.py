#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
The sources of the precedence chain, independent of any web framework.

Each source has a ``read`` method returning a raw language string
(possibly empty). The Pyramid request adapters in
:mod:`pyramid_language.adapters` build these from a request.
"""

from zope import interface

from .canonical import negotiate_accept_language

from .interfaces import IHeaderLanguageSource
from .interfaces import IRequestLanguageSource
from .interfaces import ISessionLanguageStore

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)

#: The request parameter and the session key holding the language.
LANGUAGE_KEY = 'language'

__all__ = [
    'HeaderLanguageSource',
    'LANGUAGE_KEY',
    'RequestParameterLanguageSource',
    'SessionLanguageStore',
    'sanitize_parameter',
]


def sanitize_parameter(value):
    """
    Remove the C0 control characters and everything above ASCII from
    *value*. DEL (``\\x7f``) is kept; a value containing it does not
    canonicalize and so is skipped by the resolver.

    This is lossy: a language identifier written in a non-Latin script
    is reduced to whatever ASCII it contains.
    """
    return ''.join(c for c in value if 0x20 <= ord(c) <= 0x7f)


@interface.implementer(IRequestLanguageSource)
class RequestParameterLanguageSource(object):
    """
    Reads the explicitly requested language from a mapping of request
    parameters.

    If the parameter was given more than once, the last value is used.
    """

    def __init__(self, params, key=LANGUAGE_KEY, sanitize=True):
        self.params = params if params is not None else {}
        self.key = key
        self.sanitize = sanitize

    def read(self):
        value = self.params.get(self.key)
        if isinstance(value, (list, tuple)):
            value = value[-1] if value else None
        if not isinstance(value, str):
            # Missing, or an upload
            return ''
        if self.sanitize:
            value = sanitize_parameter(value)
        return value.strip()


@interface.implementer(ISessionLanguageStore)
class SessionLanguageStore(object):
    """
    Reads and writes the sticky language in a session mapping.

    A *session* of ``None`` means there is no active session: reads
    are empty and writes are silently skipped.
    """

    def __init__(self, session, key=LANGUAGE_KEY):
        self.session = session
        self.key = key

    @property
    def active(self):
        return self.session is not None

    def read(self):
        if not self.active:
            return ''
        value = self.session.get(self.key)
        return value.strip() if isinstance(value, str) else ''

    def store(self, language):
        if not self.active:
            logger.debug("No session; not storing language %r", language)
            return
        self.session[self.key] = language


@interface.implementer(IHeaderLanguageSource)
class HeaderLanguageSource(object):
    """
    Negotiates a language from the value of an ``Accept-Language``
    header.
    """

    def __init__(self, accept_language):
        self.accept_language = accept_language

    def read(self):
        return negotiate_accept_language(self.accept_language)
