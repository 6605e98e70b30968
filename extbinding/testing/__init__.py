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
Subpackage with unittest extensions for extbinding.

Includes a content handler that records the events received from a checker
and a base test case class with plugins and binding document templates.
"""
from ._case_class import EventRecorder, ExtensionBindingTestCase, \
    LOCATOR_NAMESPACE, INJECT_NAMESPACE, BINDINGS_TEMPLATE

__all__ = ['EventRecorder', 'ExtensionBindingTestCase', 'LOCATOR_NAMESPACE',
           'INJECT_NAMESPACE', 'BINDINGS_TEMPLATE']
