#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os

from babel.messages.catalog import Catalog
from babel.messages.mofile import write_mo

from zope import interface

from ..backend import BackendResult
from ..canonical import canonicalize
from ..interfaces import ITranslationBackend


@interface.implementer(ITranslationBackend)
class FakeBackend(object):
    """
    Records the binding calls instead of touching process state.

    Operations named in *failures* report a BackendError.
    """

    def __init__(self, failures=(), resolved_path=None):
        self.calls = []
        self.verified = 0
        self.failures = failures
        self.resolved_path = resolved_path

    def _result(self, operation, value):
        if operation in self.failures:
            return BackendResult.failed(operation, 'broken')
        return BackendResult(value)

    def verify_environment(self):
        self.verified += 1

    def canonicalize(self, raw):
        self.calls.append(('canonicalize', raw))
        return canonicalize(raw)

    def set_locale_category(self, category, language, codeset=None):
        self.calls.append(('set_locale_category', category, language))
        return self._result('set_locale_category', language)

    def bind_domain_path(self, domain, path):
        self.calls.append(('bind_domain_path', domain, path))
        return self._result('bind_domain_path', self.resolved_path or path)

    def set_active_domain(self, domain):
        self.calls.append(('set_active_domain', domain))
        return self._result('set_active_domain', domain)

    def set_domain_codeset(self, domain, codeset):
        self.calls.append(('set_domain_codeset', domain, codeset))
        return self._result('set_domain_codeset', codeset)

    def operations(self):
        return [c[0] for c in self.calls]


def write_catalog(path, language, domain, messages):
    """
    Write a GNU ``.mo`` catalog for *messages* (a dict of msgid to
    msgstr; a plural entry maps a ``(singular, plural)`` tuple to a
    tuple of translations) below *path*, and return the file name.
    """
    catalog = Catalog(locale=language, domain=domain)
    for msgid, msgstr in messages.items():
        catalog.add(msgid, msgstr)

    directory = os.path.join(path, language, 'LC_MESSAGES')
    os.makedirs(directory)
    filename = os.path.join(directory, domain + '.mo')
    with open(filename, 'wb') as f:
        write_mo(f, catalog)
    return filename
