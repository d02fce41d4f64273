#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Deciding the language of a request and activating it.

Precedence
==========

The language is taken from the first of these sources whose value
canonicalizes to a non-empty tag; blank values and values that are not
locale identifiers are skipped:

1. ``request``: the ``language`` request parameter, an explicit choice
   by the user;
2. ``session``: the language stored in the session by an earlier
   resolution;
3. ``accept-language``: the best match negotiated from the browser's
   ``Accept-Language`` header;
4. ``default``: the configured default language.

The winning value is canonicalized and activated in the
:class:`~pyramid_language.interfaces.ITranslationBackend`. When a
session is active the canonical tag is written back to it, so later
requests of that session stop at the second source.

A bad value from a client (a garbled parameter, a stale session entry)
never prevents resolution. Nothing is activated unless the translation
path is valid and the language that is finally chosen canonicalizes to
something non-empty, which can only fail for a bad default; in those
cases the resolver raises before making any binding call.
"""

import os

from zope import component
from zope import interface

from zope.event import notify

from .backend import GettextTranslationBackend
from .backend import activation_lock
from .backend import choose_locale_category

from .context import LocaleContext

from .interfaces import ConfigurationError
from .interfaces import ILanguageResolver
from .interfaces import ITranslationBackend
from .interfaces import LanguageActivatedEvent
from .interfaces import ValidationError

from .model import DEFAULT_CODESET
from .model import ResolvedLanguage

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)

__all__ = [
    'LanguageResolver',
]

#: The name reported when the configured default language is used.
DEFAULT_SOURCE = 'default'


@interface.implementer(ILanguageResolver)
class LanguageResolver(object):
    """
    Resolves and activates the language for one request.

    The sources are optional; a missing source is simply empty. If no
    *backend* is given, the registered
    :class:`~pyramid_language.interfaces.ITranslationBackend` utility is
    used, or a :class:`~pyramid_language.backend.GettextTranslationBackend`.
    """

    #: The translation path, as validated and then as reported by the
    #: backend.
    path = None

    #: The last :class:`~pyramid_language.model.ResolvedLanguage`.
    resolved = None

    def __init__(self, request_source=None, session_store=None,
                 header_source=None, backend=None):
        self.request_source = request_source
        self.session_store = session_store
        self.header_source = header_source
        if backend is None:
            backend = component.queryUtility(ITranslationBackend)
        self.backend = backend if backend is not None else GettextTranslationBackend()
        self._language = ''

    def get_language(self):
        return self._language

    language = property(get_language)

    @property
    def context(self):
        """
        A :class:`~pyramid_language.context.LocaleContext` for the
        current language, or None if nothing has been activated.
        """
        if self.resolved is None:
            return None
        return LocaleContext(self.resolved)

    def initialize(self, path, default_language, domain, codeset=DEFAULT_CODESET):
        """
        Validate the translation *path*, choose the language and
        activate it.

        :return: The :class:`~pyramid_language.model.ResolvedLanguage`.
        :raises UnsupportedEnvironmentError: If the backend lacks
            internationalization support.
        :raises ConfigurationError: If *path* is not a readable directory.
        :raises ValidationError: If no language could be found at all.
        """
        self.backend.verify_environment()
        self.path = self._validate_path(path)
        source, raw = self.resolve_raw_language(default_language)
        return self.activate_language(raw, domain, codeset or DEFAULT_CODESET, source=source)

    def initialize_from(self, configuration):
        """
        Like :meth:`initialize`, taking the arguments from an
        :class:`~pyramid_language.interfaces.ILanguageConfiguration`.
        """
        return self.initialize(configuration.path,
                               configuration.default_language,
                               configuration.domain,
                               configuration.codeset)

    @staticmethod
    def _validate_path(path):
        translations = os.path.realpath(path) if path else None
        if (not translations
                or not os.path.isdir(translations)
                or not os.access(translations, os.R_OK | os.X_OK)):
            raise ConfigurationError(
                "The translation path %s does not exist or is not readable" % (path,))
        return translations

    def chain(self):
        """
        The named sources in order of precedence, excluding the default.
        """
        return (
            ('request', self.request_source),
            ('session', self.session_store),
            ('accept-language', self.header_source),
        )

    def resolve_raw_language(self, default_language):
        """
        Return the name of the first source whose value canonicalizes
        to a non-empty tag, and that (stripped) value.

        If no source qualifies, the result is ``('default',
        default_language)``, even if *default_language* is itself
        empty or invalid; :meth:`activate_language` rejects those.
        """
        for name, source in self.chain():
            if source is None:
                continue
            value = source.read()
            value = value.strip() if value else ''
            if not value:
                continue
            if not self.backend.canonicalize(value):
                logger.debug("Ignoring invalid language %r from %s", value, name)
                continue
            logger.debug("Using language %r from %s", value, name)
            return name, value
        logger.debug("Using default language %r", default_language)
        return DEFAULT_SOURCE, default_language or ''

    def activate_language(self, raw, domain, codeset=DEFAULT_CODESET, source=None):
        """
        Canonicalize *raw* and make it the active language for *domain*.

        Failures of individual backend steps do not raise; they are
        logged and reported in the ``errors`` of the result.

        :return: The :class:`~pyramid_language.model.ResolvedLanguage`.
        :raises ValidationError: If *raw* is blank or cannot be
            canonicalized.
        :raises ConfigurationError: If :meth:`initialize` has not
            validated a translation path.
        """
        if not raw or not raw.strip():
            raise ValidationError("Unable to set the language: empty language setting")
        if self.path is None:
            raise ConfigurationError("Unable to set the language: no translation path")

        language = self.backend.canonicalize(raw)
        if not language:
            raise ValidationError(
                "Unable to set the language: invalid language setting %r" % (raw,))

        errors = []

        def _check(result):
            if not result.ok:
                logger.warning("Activating language %s in domain %s: %s",
                               language, domain, result.error)
                errors.append(result.error)
            return result

        with activation_lock:
            _check(self.backend.set_locale_category(choose_locale_category(),
                                                    language, codeset))
            bound = _check(self.backend.bind_domain_path(domain, self.path))
            if bound.ok and bound.value:
                self.path = bound.value
            _check(self.backend.set_active_domain(domain))
            _check(self.backend.set_domain_codeset(domain, codeset))

        self._language = language
        if self.session_store is not None:
            self.session_store.store(language)

        self.resolved = ResolvedLanguage(language, domain, codeset,
                                         path=self.path, source=source,
                                         errors=errors)
        notify(LanguageActivatedEvent(self.resolved, self))
        return self.resolved
