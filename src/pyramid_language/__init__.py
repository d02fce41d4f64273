#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Choosing the language of a request and activating it for gettext.

Resolution
==========

A :class:`~pyramid_language.resolver.LanguageResolver` looks at, in
order, an explicit ``language`` request parameter, the language stored
in the session by an earlier request, the browser's
``Accept-Language`` header, and finally a configured default. The
first non-blank answer is canonicalized
(:func:`~pyramid_language.canonical.canonicalize`) and activated in a
:class:`~pyramid_language.interfaces.ITranslationBackend`: the locale
is set, the gettext domain is bound to the translation directory,
made the default domain, and given its codeset. If there is a session,
the canonical tag is stored there.

The sources are small objects (see :mod:`pyramid_language.sources`);
the Pyramid request is adapted to them by :mod:`pyramid_language.adapters`,
so the resolver itself can be used and tested without a request.

Process-wide state
==================

gettext and the C locale are global to a process. Activations are
serialized with a lock, but two threads handling requests in different
languages will still see whichever language was activated last. For
lookups that must not depend on that, use the
:class:`~pyramid_language.context.LocaleContext` of the resolver, which
carries its own catalog.

Pyramid integration
===================

Configuration comes from a registered
:class:`~pyramid_language.interfaces.ILanguageConfiguration` utility or
from these settings:

``pyramid_language.path``
    The directory containing ``<language>/LC_MESSAGES/<domain>.mo``.
``pyramid_language.default_language``
    Used when nothing else gives a language.
``pyramid_language.domain``
    The gettext domain.
``pyramid_language.codeset``
    Optional, defaults to ``UTF-8``.
``pyramid_language.sanitize_request``
    Optional, defaults to true: strip control and non-ASCII characters
    from the ``language`` request parameter.

.. important::

   Make sure and include ``<include package="pyramid_language" />``
   from your root ``configure.zcml``, and have Pyramid use the global
   component registry, to register the adapters, the
   :class:`~pyramid.interfaces.INewRequest` subscriber and the locale
   negotiator.

"""

__docformat__ = "restructuredtext en"
