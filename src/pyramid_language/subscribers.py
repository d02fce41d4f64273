# -*- coding: utf-8 -*-
"""
Language related subscribers.

"""

from pyramid.interfaces import INewRequest

from zope import component

from .adapters import get_configuration

from .interfaces import IHeaderLanguageSource
from .interfaces import IRequestLanguageSource
from .interfaces import ISessionLanguageStore

from .resolver import LanguageResolver

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)

__all__ = [
    'resolve_request_language',
]


@component.adapter(INewRequest)
def resolve_request_language(event):
    """
    Resolves and activates the language of a new request.

    The :class:`~pyramid_language.model.ResolvedLanguage` is left on the
    request as ``resolved_language`` and the resolver as
    ``language_resolver``. The tag is also copied to ``_LOCALE_``, so
    Pyramid's default localization machinery agrees with us in case
    it's used.

    This is registered as a subscriber for Pyramid's
    :class:`.INewRequest` event by this package's ``configure.zcml``.
    Configuration and validation errors propagate and fail the request.
    """
    request = event.request
    configuration = get_configuration(request)
    resolver = LanguageResolver(IRequestLanguageSource(request),
                                ISessionLanguageStore(request),
                                IHeaderLanguageSource(request))
    resolved = resolver.initialize_from(configuration)
    request.language_resolver = resolver
    request.resolved_language = resolved
    request._LOCALE_ = resolved.language
