#!/usr/bin/env python
# -*- coding: utf-8 -*-

import shutil
import tempfile
import unittest

from hamcrest import assert_that
from hamcrest import is_

from ..context import LocaleContext
from ..model import ResolvedLanguage

from . import write_catalog


class TestLocaleContext(unittest.TestCase):

    def setUp(self):
        self.path = tempfile.mkdtemp()
        write_catalog(self.path, 'fr', 'app', {
            'Hello': 'Bonjour',
            'Hello ${name}': 'Bonjour ${name}',
            ('file', 'files'): ('fichier', 'fichiers'),
        })

    def tearDown(self):
        shutil.rmtree(self.path, ignore_errors=True)

    def _context(self, language):
        return LocaleContext(ResolvedLanguage(language, 'app', path=self.path))

    def test_gettext(self):
        assert_that(self._context('fr').gettext('Hello'), is_('Bonjour'))

    def test_ngettext(self):
        context = self._context('fr')
        assert_that(context.ngettext('file', 'files', 1), is_('fichier'))
        assert_that(context.ngettext('file', 'files', 2), is_('fichiers'))

    def test_territory_falls_back_to_language(self):
        assert_that(self._context('fr_CH').gettext('Hello'), is_('Bonjour'))

    def test_missing_catalog(self):
        context = self._context('de')
        assert_that(context.gettext('Hello'), is_('Hello'))
        assert_that(context.ngettext('file', 'files', 2), is_('files'))

    def test_translate_mapping(self):
        context = self._context('fr')
        assert_that(context.translate('Hello ${name}', mapping={'name': 'Anne'}),
                    is_('Bonjour Anne'))
        assert_that(context.translate('Hello'), is_('Bonjour'))

    def test_translate_default(self):
        context = self._context('de')
        assert_that(context.translate('greeting', default='Hi $name',
                                      mapping={'name': 'Anne'}),
                    is_('Hi Anne'))

    def test_independent_contexts(self):
        french = self._context('fr')
        german = self._context('de')
        assert_that(french.gettext('Hello'), is_('Bonjour'))
        assert_that(german.gettext('Hello'), is_('Hello'))

    def test_repr(self):
        assert_that(repr(self._context('fr')), is_('<LocaleContext app/fr>'))
