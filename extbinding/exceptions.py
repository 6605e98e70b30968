#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
This module contains the exception classes of the package.
"""
from typing import Any, Optional
from xml.sax import SAXParseException
from xml.sax.xmlreader import Locator

from elementpath.etree import etree_tostring


class ExtBindingException(Exception):
    """The base exception that let you catch all the errors generated by the library."""


class ExtBindingTypeError(ExtBindingException, TypeError):
    pass


class ExtBindingValueError(ExtBindingException, ValueError):
    pass


class ExtBindingAttributeError(ExtBindingException, AttributeError):
    pass


class ExtBindingKeyError(ExtBindingException, KeyError):
    pass


class ExtBindingParseError(ExtBindingException, SyntaxError):
    """Raised when the XML source of a binding document is not well-formed."""


class ExtBindingForbidden(ExtBindingException):
    """Raised when the parsing of an XML source is forbidden for safety reasons."""


class ExtBindingAbort(ExtBindingException):
    """Raised by a diagnostic sink to stop the processing of a document."""

    def __init__(self, message: str, errors: Optional[list['ExtensionBindingError']] = None):
        super().__init__(message)
        self.errors = errors or []


class ExtensionBindingError(ExtBindingException, SAXParseException):
    """
    A position-tagged diagnostic for an extension binding error.

    :param message: the error message.
    :param locator: the SAX locator of the event source, if any.
    :param elem: the element that contains the error, available when the \
    events are generated from an ElementTree structure.
    :param namespaces: an optional mapping from namespace prefixes to URIs, \
    used for rendering the element.
    """
    def __init__(self, message: str,
                 locator: Optional[Locator] = None,
                 elem: Optional[Any] = None,
                 namespaces: Optional[dict[str, str]] = None) -> None:
        SAXParseException.__init__(self, message, None, locator or Locator())
        self.elem = elem
        self.namespaces = namespaces

    @property
    def message(self) -> str:
        return self.getMessage()

    @property
    def sourceline(self) -> Optional[int]:
        lineno = self.getLineNumber()
        return lineno if isinstance(lineno, int) and lineno > 0 else None

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.getMessage())

    def __str__(self) -> str:
        chunks: list[str] = [self.getMessage()]

        position = []
        if self.getSystemId():
            position.append(self.getSystemId())
        if self.sourceline is not None:
            position.append(str(self.sourceline))
            column = self.getColumnNumber()
            if isinstance(column, int) and column >= 0:
                position.append(str(column))
        if position:
            chunks.append("Position: %s" % ':'.join(position))

        if self.elem is not None:
            elem_as_string = etree_tostring(self.elem, self.namespaces, '  ', 20)
            if isinstance(elem_as_string, bytes):
                elem_as_string = elem_as_string.decode('utf-8')
            chunks.append("Element:\n\n%s" % elem_as_string)

        return '\n\n'.join(chunks)


class ExtensionBindingWarning(ExtensionBindingError):
    """A position-tagged diagnostic for a non-fatal extension binding issue."""


class ExtBindingOSError(ExtBindingException, OSError):
    """Raised when the source of a binding document can't be accessed."""
