#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Explicit, per-resolution message lookup.

The process-wide gettext state is shared by everything running in the
process. A :class:`LocaleContext` instead carries its own catalog for
one :class:`~pyramid_language.model.ResolvedLanguage`, so it can be
passed along with a request and used without regard to whatever was
activated last.
"""

import gettext

from zope.cachedescriptors.property import Lazy

from zope.i18n import interpolate

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)


class LocaleContext(object):
    """
    Translations for one language and domain.

    Missing catalogs are not an error; lookups then return the message
    id unchanged, as gettext does.
    """

    def __init__(self, resolved):
        self.resolved = resolved

    @property
    def language(self):
        return self.resolved.language

    @property
    def domain(self):
        return self.resolved.domain

    @Lazy
    def translations(self):
        # gettext expands ``de_AT`` to also look for ``de``
        return gettext.translation(self.resolved.domain,
                                   localedir=self.resolved.path,
                                   languages=[self.resolved.language],
                                   fallback=True)

    def gettext(self, message):
        return self.translations.gettext(message)

    def ngettext(self, singular, plural, n):
        return self.translations.ngettext(singular, plural, n)

    def translate(self, msgid, mapping=None, default=None):
        """
        Translate *msgid* and substitute ``$name`` or ``${name}``
        placeholders from *mapping*.

        If there is no translation, *default* (when given) is used in
        place of *msgid*.
        """
        text = self.translations.gettext(msgid)
        if text == msgid and default is not None:
            text = default
        return interpolate(text, mapping)

    def __repr__(self):
        return '<%s %s/%s>' % (type(self).__name__, self.domain, self.language)
