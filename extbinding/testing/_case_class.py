#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""
Tests subpackage module: common definitions for unittest scripts of the 'extbinding' package.
"""
import os
import unittest
from xml.sax.handler import ContentHandler

from extbinding.diagnostics import DiagnosticCollector
from extbinding.names import JAXB_NAMESPACE, XSD_NAMESPACE, XJC_EXTENSION_NAMESPACE
from extbinding.plugins import SimpleExtensionPlugin
from extbinding.registry import ExtensionRegistry

LOCATOR_NAMESPACE = 'http://example.test/locator'
INJECT_NAMESPACE = 'http://example.test/inject'

BINDINGS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="{0}" xmlns:jaxb="{1}" xmlns:xjc="{2}"
           xmlns:loc="{3}" xmlns:inj="{4}" jaxb:version="3.0" {{0}}>
{{1}}
</xs:schema>""".format(
    XSD_NAMESPACE, JAXB_NAMESPACE, XJC_EXTENSION_NAMESPACE,
    LOCATOR_NAMESPACE, INJECT_NAMESPACE
)


class EventRecorder(ContentHandler):
    """A content handler that records the received events."""

    def __init__(self):
        super().__init__()
        self.events = []

    @property
    def started_elements(self):
        return [e[1] for e in self.events if e[0] == 'start']

    @property
    def ended_elements(self):
        return [e[1] for e in self.events if e[0] == 'end']

    def startDocument(self):
        self.events.append(('start-document',))

    def endDocument(self):
        self.events.append(('end-document',))

    def startPrefixMapping(self, prefix, uri):
        self.events.append(('start-ns', prefix or '', uri))

    def endPrefixMapping(self, prefix):
        self.events.append(('end-ns', prefix or ''))

    def startElementNS(self, name, qname, attrs):
        self.events.append(('start', name[1]))

    def endElementNS(self, name, qname):
        self.events.append(('end', name[1]))

    def startElement(self, name, attrs):
        self.events.append(('start', name))

    def endElement(self, name):
        self.events.append(('end', name))

    def characters(self, content):
        if content.strip():
            self.events.append(('text', content.strip()))


class ExtensionBindingTestCase(unittest.TestCase):
    """
    Base class for testing extension binding checks, with two plugins:
    the active plugin 'Xlocator' and the inactive plugin 'Xinject'.
    """
    TEST_CASES_DIR = None
    longMessage = True

    @classmethod
    def casepath(cls, relative_path):
        """
        Returns the absolute path from a relative path specified from
        the test cases directory.
        """
        try:
            return os.path.join(cls.TEST_CASES_DIR, relative_path)
        except TypeError:
            raise unittest.SkipTest("TEST_CASES_DIR is not set")

    def setUp(self):
        self.locator_plugin = SimpleExtensionPlugin(
            'Xlocator', {LOCATOR_NAMESPACE: ['location', 'line']}, active=True
        )
        self.inject_plugin = SimpleExtensionPlugin(
            'Xinject', {INJECT_NAMESPACE: ['code', 'prolog']}
        )
        self.registry = ExtensionRegistry([self.locator_plugin, self.inject_plugin])
        self.collector = DiagnosticCollector()
        self.recorder = EventRecorder()

    def get_bindings(self, content='', attributes=''):
        return BINDINGS_TEMPLATE.format(attributes, content)

    def check_messages(self, diagnostics, *messages):
        self.assertEqual(len(diagnostics), len(messages),
                         msg=[e.getMessage() for e in diagnostics])
        for exc, message in zip(diagnostics, messages):
            self.assertIn(message, exc.getMessage())
