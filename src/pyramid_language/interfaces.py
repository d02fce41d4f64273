#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Interfaces and exceptions for language resolution.

"""

from zope import interface

from zope.interface.interfaces import IObjectEvent
from zope.interface.interfaces import ObjectEvent

__docformat__ = "restructuredtext en"

#: The locale category that only affects message translation.
MESSAGES_ONLY = 'MESSAGES_ONLY'

#: The locale category that affects everything (used where the
#: platform has no messages-only category).
ALL = 'ALL'


class LanguageError(Exception):
    """
    Base class for the errors raised while resolving a language.
    """


class UnsupportedEnvironmentError(LanguageError):
    """
    The host environment lacks a capability required for
    internationalization.
    """


class ConfigurationError(LanguageError, ValueError):
    """
    The translation path is missing, not a directory or unreadable, or
    required settings are absent.
    """


class ValidationError(LanguageError, ValueError):
    """
    An empty or unusable language setting reached activation.
    """


class BackendError(LanguageError):
    """
    A translation backend step failed.

    These are not raised by the resolver; they are reported as values
    so that callers can observe them.
    """

    def __init__(self, operation, message):
        LanguageError.__init__(self, operation, message)
        self.operation = operation
        self.message = message

    def __str__(self):
        return '%s: %s' % (self.operation, self.message)


class ILanguageSource(interface.Interface):
    """
    Something that may produce a raw language string.
    """

    def read():
        """
        Return the raw language string, or None or an empty string
        if this source has nothing to say.
        """


class IRequestLanguageSource(ILanguageSource):
    """
    An explicit language requested with the request parameters.
    """


class ISessionLanguageStore(ILanguageSource):
    """
    The sticky language kept in the session.
    """

    active = interface.Attribute("Whether there is a session to read and write.")

    def store(language):
        """
        Remember *language* in the session. Does nothing if
        the session is not active.
        """


class IHeaderLanguageSource(ILanguageSource):
    """
    The language negotiated from the ``Accept-Language`` header.
    """


class ITranslationBackend(interface.Interface):
    """
    A gettext-style translation library.

    The binding methods return :class:`pyramid_language.backend.BackendResult`
    objects instead of raising.
    """

    def verify_environment():
        """
        Check that internationalization support is present.

        :raises UnsupportedEnvironmentError: If it is not.
        """

    def canonicalize(raw):
        """
        Return the canonical form of the *raw* locale identifier, or an
        empty string.
        """

    def set_locale_category(category, language, codeset=None):
        """
        Set the process locale for *category* (:data:`MESSAGES_ONLY` or
        :data:`ALL`) to *language*, preferring the variant of the
        locale with *codeset* if one is given.
        """

    def bind_domain_path(domain, path):
        """
        Bind *domain* to the catalogs below *path*. The result value is
        the path the library actually uses.
        """

    def set_active_domain(domain):
        """
        Make *domain* the default domain for lookups.
        """

    def set_domain_codeset(domain, codeset):
        """
        Set the encoding of translated messages in *domain*.
        """


class ILanguageConfiguration(interface.Interface):
    """
    The immutable startup configuration.
    """

    path = interface.Attribute("The directory holding the translation catalogs.")
    default_language = interface.Attribute("The language used if nothing else is found.")
    domain = interface.Attribute("The gettext domain.")
    codeset = interface.Attribute("The encoding of translated messages.")
    sanitize_request = interface.Attribute(
        "Whether to strip control and non-ASCII characters from the request parameter.")


class ILanguageResolver(interface.Interface):
    """
    Decides the active language and activates the translation backend.
    """

    def initialize(path, default_language, domain, codeset='UTF-8'):
        """
        Validate *path*, run the precedence chain and activate the result.
        """

    def activate_language(raw, domain, codeset='UTF-8'):
        """
        Canonicalize *raw* and activate it in the backend.
        """

    def get_language():
        """
        The last activated canonical language, or an empty string.
        """


class ILanguageActivatedEvent(IObjectEvent):
    """
    A language has been activated. The object is the
    :class:`pyramid_language.model.ResolvedLanguage`.
    """

    resolver = interface.Attribute("The resolver that activated it.")


@interface.implementer(ILanguageActivatedEvent)
class LanguageActivatedEvent(ObjectEvent):

    def __init__(self, resolved, resolver=None):
        ObjectEvent.__init__(self, resolved)
        self.resolver = resolver
