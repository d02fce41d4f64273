#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
The default translation backend: the process-wide gettext machinery.

The C library's locale and gettext state (and the domain bindings of
the pure-Python :mod:`gettext` module, which we keep in step) are
global to the process. Activations therefore hold
:data:`activation_lock`; a worker that handles several requests in
threads never has two activations interleaved. Code that needs a
per-request view should translate through a
:class:`pyramid_language.context.LocaleContext` instead.

Failures of the individual steps are returned as :class:`BackendResult`
values carrying a :class:`.BackendError` rather than being raised or
ignored.
"""

import codecs
import gettext
import locale
import threading

from collections import namedtuple

from zope import interface

from zope.i18n.locales import LoadLocaleError
from zope.i18n.locales import locales

from .canonical import canonicalize

from .interfaces import ALL
from .interfaces import MESSAGES_ONLY
from .interfaces import BackendError
from .interfaces import ITranslationBackend
from .interfaces import UnsupportedEnvironmentError

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)

__all__ = [
    'BackendResult',
    'GettextTranslationBackend',
    'activation_lock',
    'choose_locale_category',
]

#: Held while a language is being activated in the process-wide state.
activation_lock = threading.RLock()


class BackendResult(namedtuple('_BackendResultBase', ('value', 'error'))):
    """
    The outcome of one backend call: a *value*, or an *error*
    (a :class:`.BackendError`).
    """

    __slots__ = ()

    def __new__(cls, value=None, error=None):
        return super(BackendResult, cls).__new__(cls, value, error)

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def failed(cls, operation, message):
        return cls(None, BackendError(operation, str(message)))


def choose_locale_category():
    """
    Return :data:`.MESSAGES_ONLY` if the platform has a messages-only
    locale category, otherwise :data:`.ALL`. Windows has no
    ``LC_MESSAGES``.
    """
    return MESSAGES_ONLY if hasattr(locale, 'LC_MESSAGES') else ALL


@interface.implementer(ITranslationBackend)
class GettextTranslationBackend(object):
    """
    Drives :func:`locale.setlocale`, the C-level ``bindtextdomain``
    family where the platform provides it, and the equivalent
    functions of the :mod:`gettext` module.
    """

    def verify_environment(self):
        # The root locale is the minimum zope.i18n needs to
        # negotiate anything.
        try:
            locales.getLocale(None, None, None)
        except LoadLocaleError as e:
            raise UnsupportedEnvironmentError("Required capability missing: locale data (%s)" % e)
        if not hasattr(locale, 'setlocale'): # pragma: no cover
            raise UnsupportedEnvironmentError("Required capability missing: setlocale")

    def canonicalize(self, raw):
        return canonicalize(raw)

    def set_locale_category(self, category, language, codeset=None):
        lc = locale.LC_ALL if category == ALL else locale.LC_MESSAGES
        # The C library usually only knows the locale with its encoding
        candidates = [language]
        if codeset:
            candidates.insert(0, '%s.%s' % (language, codeset))
        for candidate in candidates:
            try:
                return BackendResult(locale.setlocale(lc, candidate))
            except locale.Error:
                logger.debug("Locale %r not available", candidate)
        return BackendResult.failed('set_locale_category',
                                    'unsupported locale %s' % language)

    def bind_domain_path(self, domain, path):
        try:
            resolved = gettext.bindtextdomain(domain, path)
            if hasattr(locale, 'bindtextdomain'):
                resolved = locale.bindtextdomain(domain, path)
        except (OSError, ValueError) as e:
            return BackendResult.failed('bind_domain_path', e)
        return BackendResult(resolved)

    def set_active_domain(self, domain):
        try:
            result = gettext.textdomain(domain)
            if hasattr(locale, 'textdomain'):
                result = locale.textdomain(domain)
        except (OSError, ValueError) as e:
            return BackendResult.failed('set_active_domain', e)
        return BackendResult(result)

    def set_domain_codeset(self, domain, codeset):
        try:
            codecs.lookup(codeset)
        except LookupError:
            return BackendResult.failed('set_domain_codeset', 'unknown codeset %s' % codeset)
        if not hasattr(locale, 'bind_textdomain_codeset'):
            # Python-level lookups return text regardless
            logger.debug("No bind_textdomain_codeset on this platform")
            return BackendResult(None)
        try:
            return BackendResult(locale.bind_textdomain_codeset(domain, codeset))
        except (OSError, ValueError) as e:
            return BackendResult.failed('set_domain_codeset', e)
