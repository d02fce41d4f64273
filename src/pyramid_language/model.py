#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Value objects: the startup configuration and the result of a
resolution.
"""

from collections import namedtuple

from pyramid.settings import asbool

from zope import interface

from nti.property.property import alias

from .interfaces import ConfigurationError
from .interfaces import ILanguageConfiguration

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)

DEFAULT_CODESET = 'UTF-8'

#: The prefix of the Pyramid settings we read.
SETTINGS_PREFIX = 'pyramid_language.'

__all__ = [
    'Configuration',
    'DEFAULT_CODESET',
    'ResolvedLanguage',
]


@interface.implementer(ILanguageConfiguration)
class Configuration(namedtuple('_ConfigurationBase',
                               ('path', 'default_language', 'domain',
                                'codeset', 'sanitize_request'))):
    """
    The immutable configuration supplied once at startup.
    """

    __slots__ = ()

    def __new__(cls, path, default_language, domain,
                codeset=DEFAULT_CODESET, sanitize_request=True):
        return super(Configuration, cls).__new__(cls, path, default_language, domain,
                                                 codeset or DEFAULT_CODESET,
                                                 sanitize_request)

    @classmethod
    def from_settings(cls, settings, prefix=SETTINGS_PREFIX):
        """
        Create the configuration from a Pyramid settings dictionary.

        The keys ``path``, ``default_language`` and ``domain`` (with
        the *prefix*) are required; ``codeset`` and
        ``sanitize_request`` are optional.

        :raises ConfigurationError: If a required key is missing.
        """
        settings = settings or {}

        def _get(name, required=True):
            value = settings.get(prefix + name)
            if isinstance(value, str):
                value = value.strip()
            if required and not value:
                raise ConfigurationError("Missing setting %s%s" % (prefix, name))
            return value

        return cls(_get('path'),
                   _get('default_language'),
                   _get('domain'),
                   _get('codeset', False) or DEFAULT_CODESET,
                   asbool(settings.get(prefix + 'sanitize_request', True)))


class ResolvedLanguage(namedtuple('_ResolvedLanguageBase',
                                  ('language', 'domain', 'codeset',
                                   'path', 'source', 'errors'))):
    """
    The outcome of one activation.

    ``errors`` holds the :class:`.BackendError` values reported while
    activating; it is empty when every backend step succeeded.
    """

    __slots__ = ()

    tag = alias('language')

    def __new__(cls, language, domain, codeset=DEFAULT_CODESET,
                path=None, source=None, errors=()):
        return super(ResolvedLanguage, cls).__new__(cls, language, domain, codeset,
                                                    path, source, tuple(errors))

    @property
    def succeeded(self):
        return not self.errors
