#!/usr/bin/env python
#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import io
import os
import pathlib
import platform
import unittest
from xml.etree import ElementTree

try:
    import lxml.etree as lxml_etree
except ImportError:
    lxml_etree = None

from extbinding import ExtBindingForbidden, ExtBindingOSError, ExtBindingParseError, \
    ExtBindingTypeError, ExtensionBindingError, ExtensionBindingWarning, \
    DiagnosticCollector, check_bindings, iter_errors, validate, is_valid, \
    checker_settings
from extbinding.checkers import XsdExtensionBindingChecker, DtdExtensionBindingChecker
from extbinding.documents import get_checker
from extbinding.names import XSD_NAMESPACE, JAXB_NAMESPACE, XJC_EXTENSION_NAMESPACE
from extbinding.settings import CheckerSettings
from extbinding.testing import ExtensionBindingTestCase, LOCATOR_NAMESPACE


class TestCheckBindings(ExtensionBindingTestCase):

    TEST_CASES_DIR = os.path.join(os.path.dirname(__file__), 'test_cases')

    def tearDown(self):
        checker_settings.reset()

    def test_get_checker(self):
        checker = get_checker(self.registry, self.collector)
        self.assertIsInstance(checker, XsdExtensionBindingChecker)
        self.assertFalse(checker.allow_extensions)

        settings = CheckerSettings(schema_language='dtd', compatibility_mode='extension')
        checker = get_checker(self.registry, self.collector, self.recorder, settings)
        self.assertIsInstance(checker, DtdExtensionBindingChecker)
        self.assertTrue(checker.allow_extensions)
        self.assertIs(checker.cutter.handler, self.recorder)

    def test_valid_bindings(self):
        collector = check_bindings(self.casepath('bindings/valid.xsd'))
        self.assertIsInstance(collector, DiagnosticCollector)
        self.assertListEqual(collector.errors, [])
        self.assertListEqual(collector.warnings, [])
        self.assertTrue(is_valid(self.casepath('bindings/valid.xsd')))
        self.assertIsNone(validate(self.casepath('bindings/valid.xsd')))

    def test_extensions_in_strict_mode(self):
        filepath = self.casepath('bindings/extensions.xsd')
        collector = check_bindings(filepath)
        self.check_messages(
            collector.errors,
            "the attribute 'extensionBindingPrefixes' can be used only in extension mode"
        )
        self.check_messages(collector.warnings,
                            "is ignored because it's not listed",
                            "is ignored because it's not listed")
        self.assertIsInstance(collector.warnings[0], ExtensionBindingWarning)
        self.assertEqual(collector.errors[0].getSystemId(), filepath)
        self.assertEqual(collector.errors[0].sourceline, 2)
        self.assertFalse(is_valid(filepath))

    def test_extension_mode(self):
        filepath = self.casepath('bindings/extensions.xsd')
        self.assertTrue(is_valid(filepath, compatibility_mode='extension'))

        checker_settings.set_options(compatibility_mode='extension')
        self.assertTrue(is_valid(filepath))

    def test_invalid_bindings(self):
        errors = list(iter_errors(self.casepath('bindings/invalid.xsd'),
                                  compatibility_mode='extension'))
        self.check_messages(
            errors,
            "unsupported binding namespace 'http://java.sun.com/xml/ns/jaxb/xjk', "
            "perhaps you meant 'http://java.sun.com/xml/ns/jaxb/xjc'?",
            "prefix 'foo' is not declared"
        )

        with self.assertRaises(ExtensionBindingError) as ctx:
            validate(self.casepath('bindings/invalid.xsd'), compatibility_mode='extension')
        self.assertIn("unsupported binding namespace", str(ctx.exception))
        self.assertIn("Position: ", str(ctx.exception))

    def test_max_errors(self):
        collector = check_bindings(self.casepath('bindings/invalid.xsd'),
                                   compatibility_mode='extension', max_errors=1)
        self.assertEqual(len(collector.errors), 1)

    def test_max_errors_stops_check(self):
        source = self.get_bindings(
            '<xs:annotation><xs:appinfo><loc:first/><loc:second/><loc:third/>'
            '</xs:appinfo></xs:annotation>',
            'jaxb:extensionBindingPrefixes="loc"'
        )
        collector = check_bindings(source, registry=self.registry,
                                   compatibility_mode='extension', handler=self.recorder)
        self.check_messages(collector.errors,
                            "unsupported customization 'loc:first'",
                            "unsupported customization 'loc:second'",
                            "unsupported customization 'loc:third'")

        self.recorder.events.clear()
        collector = check_bindings(source, registry=self.registry,
                                   compatibility_mode='extension', max_errors=2,
                                   handler=self.recorder)
        self.check_messages(collector.errors,
                            "unsupported customization 'loc:first'",
                            "unsupported customization 'loc:second'")
        self.assertNotIn(('end-document',), self.recorder.events)

        checker_settings.set_options(max_errors=2)
        self.assertEqual(len(list(iter_errors(source, registry=self.registry,
                                              compatibility_mode='extension'))), 2)

    def test_dtd_bindings(self):
        filepath = self.casepath('bindings/bindings.xjs')
        collector = check_bindings(filepath, schema_language='dtd')
        self.check_messages(
            collector.errors,
            "vendor extension namespace 'http://java.sun.com/xml/ns/jaxb/xjc' "
            "can't be used in strict mode"
        )
        self.assertTrue(is_valid(filepath, schema_language='dtd',
                                 compatibility_mode='extension'))

    def test_plugins_arguments(self):
        source = self.get_bindings(
            '<xs:annotation><xs:appinfo><loc:location/></xs:appinfo></xs:annotation>',
            'jaxb:extensionBindingPrefixes="loc"'
        )
        self.assertFalse(is_valid(source, compatibility_mode='extension'))
        self.assertTrue(is_valid(source, [self.locator_plugin],
                                 compatibility_mode='extension'))
        self.assertTrue(is_valid(source, [self.locator_plugin, self.inject_plugin],
                                 compatibility_mode='extension'))
        self.assertTrue(is_valid(source, registry=self.registry,
                                 compatibility_mode='extension'))

        source = self.get_bindings(
            '<xs:annotation><xs:appinfo><inj:code/></xs:appinfo></xs:annotation>',
            'jaxb:extensionBindingPrefixes="inj"'
        )
        self.assertFalse(is_valid(source, [self.inject_plugin],
                                  compatibility_mode='extension'))
        self.assertTrue(is_valid(source, [self.inject_plugin], ['Xinject'],
                                 compatibility_mode='extension'))

    def test_downstream_handler(self):
        check_bindings(
            self.get_bindings('<xs:annotation><xs:appinfo><loc:location/>'
                              '</xs:appinfo></xs:annotation>'),
            registry=self.registry, handler=self.recorder
        )
        self.assertListEqual(self.recorder.started_elements,
                             ['schema', 'annotation', 'appinfo'])

    def test_source_types(self):
        filepath = self.casepath('bindings/valid.xsd')
        self.assertTrue(is_valid(pathlib.Path(filepath)))

        with open(filepath, 'rb') as fp:
            data = fp.read()
        self.assertTrue(is_valid(data))
        self.assertTrue(is_valid(io.BytesIO(data)))
        self.assertTrue(is_valid(io.StringIO(data.decode('utf-8'))))
        self.assertTrue(is_valid(data.decode('utf-8')))

        with open(filepath, 'rb') as fp:
            self.assertTrue(is_valid(fp))

        with self.assertRaises(ExtBindingTypeError):
            check_bindings(10)
        with self.assertRaises(ExtBindingTypeError):
            check_bindings(None)

    def test_missing_file(self):
        with self.assertRaises(ExtBindingOSError):
            check_bindings(self.casepath('bindings/missing.xsd'))
        with self.assertRaises(OSError):
            check_bindings(pathlib.Path(self.casepath('bindings/missing.xsd')))

    def test_malformed_document(self):
        with self.assertRaises(ExtBindingParseError) as ctx:
            check_bindings(self.casepath('bindings/malformed.xsd'))
        self.assertIn("invalid XML syntax", str(ctx.exception))

        with self.assertRaises(SyntaxError):
            check_bindings('<xs:schema xmlns:xs="{}">'.format(XSD_NAMESPACE))

    def test_forbidden_entities(self):
        source = '<!DOCTYPE root [<!ENTITY e "foo">]>\n<root>&e;</root>'
        with self.assertRaises(ExtBindingForbidden):
            check_bindings(source)

        self.assertTrue(is_valid(source, defuse=False))

        source = '<!DOCTYPE r [<!ENTITY e "x">]>\n<r>&e;</r>'
        with self.assertRaises(ExtBindingForbidden) as ctx:
            check_bindings(source.encode('utf-8'))
        self.assertIn("Entities are forbidden", str(ctx.exception))
        self.assertListEqual(check_bindings(source, defuse=False).errors, [])

        checker_settings.set_options(defuse=False)
        self.assertTrue(is_valid(source))

    def test_logging_level(self):
        with self.assertLogs('extbinding', level='DEBUG') as ctx:
            check_bindings(self.casepath('bindings/valid.xsd'), loglevel=10)
        self.assertTrue(any("Check bindings of" in line for line in ctx.output))


class TestCheckElementTree(ExtensionBindingTestCase):

    namespaces = {
        'xs': XSD_NAMESPACE,
        'jaxb': JAXB_NAMESPACE,
        'xjc': XJC_EXTENSION_NAMESPACE,
        'loc': LOCATOR_NAMESPACE,
    }

    def test_element_source(self):
        root = ElementTree.XML(self.get_bindings(
            '<xs:annotation><xs:appinfo><loc:location/><loc:unknown/>'
            '</xs:appinfo></xs:annotation>',
            'jaxb:extensionBindingPrefixes="loc"'
        ))
        collector = check_bindings(root, registry=self.registry,
                                   compatibility_mode='extension',
                                   namespaces=self.namespaces)
        self.check_messages(collector.errors, "unsupported customization 'loc:unknown'")

        error = collector.errors[0]
        self.assertIsNone(error.sourceline)
        self.assertIs(error.elem, root[0][0][1])
        self.assertIn("Element:", str(error))
        self.assertIn("unknown", str(error).split("Element:")[1])

    def test_element_tree_source(self):
        tree = ElementTree.ElementTree(ElementTree.XML(self.get_bindings(
            '<xs:annotation><xs:appinfo><loc:location/></xs:appinfo></xs:annotation>'
        )))
        collector = check_bindings(tree, registry=self.registry,
                                   namespaces=self.namespaces, handler=self.recorder)
        self.assertListEqual(collector.errors, [])
        self.check_messages(collector.warnings, "is ignored because it's not listed")
        self.assertListEqual(self.recorder.started_elements,
                             ['schema', 'annotation', 'appinfo'])

    def test_missing_namespaces(self):
        root = ElementTree.XML(self.get_bindings(
            attributes='jaxb:extensionBindingPrefixes="loc"'
        ))
        collector = check_bindings(root, registry=self.registry,
                                   compatibility_mode='extension')
        self.check_messages(collector.errors, "prefix 'loc' is not declared")

    @unittest.skipIf(lxml_etree is None, "lxml is not installed ...")
    def test_lxml_source(self):
        root = lxml_etree.XML(self.get_bindings(
            '<xs:annotation><xs:appinfo><loc:location/>\n<loc:unknown/>'
            '</xs:appinfo></xs:annotation>',
            'jaxb:extensionBindingPrefixes="loc"'
        ).encode('utf-8'))
        collector = check_bindings(root, registry=self.registry,
                                   compatibility_mode='extension')
        self.check_messages(collector.errors, "unsupported customization 'loc:unknown'")
        self.assertEqual(collector.errors[0].sourceline, 5)

        collector = check_bindings(lxml_etree.ElementTree(root), registry=self.registry,
                                   handler=self.recorder)
        self.check_messages(
            collector.errors,
            "the attribute 'extensionBindingPrefixes' can be used only in extension mode"
        )
        self.check_messages(collector.warnings,
                            "is ignored because it's not listed",
                            "is ignored because it's not listed")
        self.assertEqual(collector.warnings[1].sourceline, 5)
        self.assertListEqual(self.recorder.started_elements,
                             ['schema', 'annotation', 'appinfo'])


if __name__ == '__main__':
    header_template = "Binding documents tests for extbinding with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
