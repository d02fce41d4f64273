#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Pyramid integration: adapters from a request to the language sources,
plus the locale negotiator and translation directories Pyramid's own
i18n machinery uses.

These are registered by this package's ``configure.zcml``.
"""

from pyramid.i18n import default_locale_negotiator

from pyramid.interfaces import ILocaleNegotiator
from pyramid.interfaces import IRequest
from pyramid.interfaces import ITranslationDirectories

from pyramid.settings import asbool

from pyramid.threadlocal import get_current_registry

from zope import component
from zope import interface

from zope.cachedescriptors.property import Lazy

from .interfaces import ConfigurationError
from .interfaces import IHeaderLanguageSource
from .interfaces import ILanguageConfiguration
from .interfaces import IRequestLanguageSource
from .interfaces import ISessionLanguageStore

from .model import SETTINGS_PREFIX
from .model import Configuration

from .sources import HeaderLanguageSource
from .sources import RequestParameterLanguageSource
from .sources import SessionLanguageStore

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)

__all__ = [
    'PyramidHeaderLanguageSource',
    'PyramidRequestLanguageSource',
    'PyramidSessionLanguageStore',
    'ResolvedTranslationDirectories',
    'get_configuration',
    'language_locale_negotiator',
]


def _settings(request=None):
    registry = getattr(request, 'registry', None)
    if registry is None:
        registry = get_current_registry()
    return getattr(registry, 'settings', None) or {}


def get_configuration(request=None):
    """
    Return the :class:`~pyramid_language.interfaces.ILanguageConfiguration`.

    A registered utility wins; otherwise the configuration is read from
    the settings of the request's (or the current) registry.

    :raises ConfigurationError: If neither provides the required values.
    """
    config = component.queryUtility(ILanguageConfiguration)
    if config is None:
        config = Configuration.from_settings(_settings(request))
    return config


def combined_params(request):
    """
    The query string and form parameters of *request* as one dictionary
    of lists. Form (body) values replace query values of the same name.
    """
    def _d_o_l(o):
        # DummyRequest GET/POST are different
        return o.dict_of_lists() if hasattr(o, 'dict_of_lists') else dict(o)
    params = _d_o_l(request.GET)
    params.update(_d_o_l(request.POST))
    return params


@component.adapter(IRequest)
@interface.implementer(IRequestLanguageSource)
def PyramidRequestLanguageSource(request):
    config = component.queryUtility(ILanguageConfiguration)
    if config is not None:
        sanitize = config.sanitize_request
    else:
        sanitize = asbool(_settings(request).get(SETTINGS_PREFIX + 'sanitize_request', True))
    return RequestParameterLanguageSource(combined_params(request), sanitize=sanitize)


@component.adapter(IRequest)
@interface.implementer(ISessionLanguageStore)
def PyramidSessionLanguageStore(request):
    try:
        session = request.session
    except AttributeError:
        # No session factory configured; that's not an error for us
        session = None
    return SessionLanguageStore(session)


@component.adapter(IRequest)
@interface.implementer(IHeaderLanguageSource)
def PyramidHeaderLanguageSource(request):
    return HeaderLanguageSource(request.headers.get('Accept-Language'))


@interface.provider(ILocaleNegotiator)
def language_locale_negotiator(request):
    """
    A pyramid locale negotiator that answers with the language resolved
    for the request by
    :func:`pyramid_language.subscribers.resolve_request_language`.

    If nothing was resolved, Pyramid's default negotiator decides.
    """
    resolved = getattr(request, 'resolved_language', None)
    if resolved is not None:
        return resolved.language
    return default_locale_negotiator(request)


@interface.implementer(ITranslationDirectories)
class ResolvedTranslationDirectories(object):
    """
    Implements the readable contract of Pyramid's translation directory
    list from our configured translation path, so Pyramid's localizer
    reads the same catalogs.

    .. note:: This queries just once, the first time it is used.
    """

    def __iter__(self):
        return iter(self._dirs)

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self._dirs)

    @Lazy
    def _dirs(self):
        try:
            config = get_configuration()
        except ConfigurationError:
            logger.debug("No language configuration; no translation directories")
            return []
        return [config.path]

    @classmethod
    def testing_cleanup(cls): # pragma: no cover
        for d in component.getAllUtilitiesRegisteredFor(ITranslationDirectories):
            if isinstance(d, ResolvedTranslationDirectories):
                d.__dict__.pop('_dirs', None)

try:
    from zope.testing import cleanup
except ImportError: # pragma: no cover
    pass
else:
    cleanup.addCleanUp(ResolvedTranslationDirectories.testing_cleanup)
