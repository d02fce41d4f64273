#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Canonical locale identifiers and ``Accept-Language`` negotiation.

Every language tag this package activates passes through
:func:`canonicalize`; nothing else builds a tag by hand. The result
uses underscores and the conventional casing (``de_AT``,
``zh_Hant_TW``, ``sr_Latn``).

Negotiation of the ``Accept-Language`` header reuses the parsing done
by :class:`zope.publisher.browser.BrowserLanguages` (quality ordering,
``q=0`` removal) and accepts the first language range for which
Babel has locale data.
"""

import re

from babel.core import get_locale_identifier
from babel.core import parse_locale

from babel import localedata

from zope.publisher.browser import BrowserLanguages

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)

__all__ = [
    'canonicalize',
    'negotiate_accept_language',
]

# A BCP 47-ish language range, after zope.publisher has lower-cased it.
_LANGUAGE_RANGE = re.compile(r'^[a-z]{1,8}(-[a-z0-9]{1,8})*$')


def canonicalize(raw):
    """
    Return the canonical form of the locale identifier *raw*.

    Both ``-`` and ``_`` separate the parts; a POSIX codeset
    (``.UTF-8``) or modifier (``@euro``) is dropped. Input that cannot
    be parsed produces an empty string; this never raises.

    >>> canonicalize('en-us')
    'en_US'
    >>> canonicalize('en_US.UTF-8')
    'en_US'
    >>> canonicalize('not a locale')
    ''
    """
    if not raw:
        return ''
    identifier = raw.strip()
    for sep in ('.', '@'):
        identifier = identifier.split(sep, 1)[0]
    identifier = identifier.replace('-', '_')
    if not identifier or not identifier.isascii():
        return ''
    try:
        parts = parse_locale(identifier, sep='_')
    except ValueError:
        logger.debug("Unable to canonicalize %r", raw)
        return ''
    return get_locale_identifier(parts[:4])


def _available(identifier):
    """
    Return *identifier*, or the longest prefix of it, for which Babel
    ships locale data, or an empty string.
    """
    parts = identifier.split('_')
    while parts:
        candidate = '_'.join(parts)
        if localedata.exists(candidate):
            return candidate
        parts.pop()
    return ''


def negotiate_accept_language(header):
    """
    Find the best language in the ``Accept-Language`` *header* value.

    Each language range, in order of preference, is canonicalized
    (so scripts and numeric regions keep their place: ``zh-Hant-TW``
    is ``zh_Hant_TW``, ``es-419`` is ``es_419``). The first range for
    which locale data exists, possibly after dropping trailing
    subtags, wins. Returns an empty string if there is none (including
    when *header* is empty).

    >>> negotiate_accept_language('fr-CH, fr;q=0.9, en;q=0.8')
    'fr_CH'
    """
    if not header or not header.strip():
        return ''
    # BrowserLanguages only needs something with a ``get`` for the
    # CGI-style header name.
    preferred = BrowserLanguages({'HTTP_ACCEPT_LANGUAGE': header})
    for lang in preferred.getPreferredLanguages():
        if not _LANGUAGE_RANGE.match(lang):
            continue
        result = _available(canonicalize(lang))
        if result:
            return result
        logger.debug("No locale data for language range %r", lang)
    return ''
