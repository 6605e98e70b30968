#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import translation
from .exceptions import ExtBindingException, ExtBindingTypeError, ExtBindingValueError, \
    ExtBindingAttributeError, ExtBindingKeyError, ExtBindingParseError, \
    ExtBindingForbidden, ExtBindingAbort, ExtBindingOSError, \
    ExtensionBindingError, ExtensionBindingWarning
from .names import XSD_NAMESPACE, JAXB_NAMESPACE, XJC_EXTENSION_NAMESPACE
from .namespaces import NamespaceScope
from .plugins import ExtensionPlugin, SimpleExtensionPlugin, load_plugins
from .registry import ExtensionRegistry
from .cutter import SubtreeCutter
from .diagnostics import DiagnosticCollector
from .checkers import ExtensionBindingChecker, XsdExtensionBindingChecker, \
    DtdExtensionBindingChecker
from .sax import create_parser, parse_source, saxify
from .settings import CheckerSettings, checker_settings
from .documents import check_bindings, iter_errors, validate, is_valid
from .utils.logger import set_logging_level

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2025, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'translation', 'ExtBindingException', 'ExtBindingTypeError', 'ExtBindingValueError',
    'ExtBindingAttributeError', 'ExtBindingKeyError', 'ExtBindingParseError',
    'ExtBindingForbidden', 'ExtBindingAbort', 'ExtBindingOSError',
    'ExtensionBindingError', 'ExtensionBindingWarning', 'XSD_NAMESPACE',
    'JAXB_NAMESPACE', 'XJC_EXTENSION_NAMESPACE', 'NamespaceScope',
    'ExtensionPlugin', 'SimpleExtensionPlugin', 'load_plugins', 'ExtensionRegistry',
    'SubtreeCutter', 'DiagnosticCollector', 'ExtensionBindingChecker',
    'XsdExtensionBindingChecker', 'DtdExtensionBindingChecker', 'create_parser',
    'parse_source', 'saxify', 'CheckerSettings', 'checker_settings',
    'check_bindings', 'iter_errors', 'validate', 'is_valid', 'set_logging_level',
]
