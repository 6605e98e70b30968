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
This module contains the checkers of vendor extensions in binding documents.
"""
import logging
from typing import Any, Optional
from xml.sax.handler import ContentHandler, ErrorHandler
from xml.sax.xmlreader import Locator

from extbinding.cutter import SubtreeCutter
from extbinding.exceptions import ExtensionBindingError, ExtensionBindingWarning
from extbinding.names import XSD_NAMESPACE, DTD_NAMESPACE, JAXB_NAMESPACE
from extbinding.namespaces import NamespaceScope
from extbinding.registry import ExtensionRegistry
from extbinding.translation import gettext as _
from extbinding.utils.qnames import get_prefixed_qname, split_ns_name

logger = logging.getLogger('extbinding')

NameType = tuple[Optional[str], str]


class ExtensionBindingChecker(ContentHandler):
    """
    A SAX content handler that checks the vendor extensions of a binding
    document and forwards the events to a downstream content handler,
    through a subtree cutter. The base class provides the checks and keeps
    the state of the document, the subclasses decide when to apply the checks.

    :param schema_language: the namespace URI of the host schema language, \
    whose elements are always allowed.
    :param registry: the registry view of the available extensions.
    :param error_handler: the SAX error handler that receives the diagnostics.
    :param handler: the downstream content handler, used if no cutter is provided.
    :param cutter: an optional subtree cutter that forwards the events to \
    the downstream handler. For default a :class:`SubtreeCutter` is created.
    :param allow_extensions: if `False`, the default, any use of extensions \
    is an error.
    """
    def __init__(self, schema_language: str,
                 registry: ExtensionRegistry,
                 error_handler: ErrorHandler,
                 handler: Optional[ContentHandler] = None,
                 cutter: Optional[Any] = None,
                 allow_extensions: bool = False) -> None:
        super().__init__()
        self.schema_language = schema_language
        self.registry = registry
        self.error_handler = error_handler
        self.allow_extensions = allow_extensions
        self.cutter = cutter if cutter is not None else SubtreeCutter(handler)
        self.ns_scope = NamespaceScope()
        self._enabled_extensions: set[str] = set()

    def __repr__(self) -> str:
        return '%s(schema_language=%r, registry=%r)' % (
            self.__class__.__name__, self.schema_language, self.registry
        )

    @property
    def enabled_extensions(self) -> frozenset[str]:
        """The namespace URIs of the extensions enabled in the current document."""
        return frozenset(self._enabled_extensions)

    @property
    def locator(self) -> Optional[Locator]:
        return self._locator

    ###
    # Checks of vendor extensions
    def check_and_enable(self, uri: str) -> None:
        """
        Verifies that the given namespace URI is a valid extension namespace URI
        and enables it. The URI is enabled also if it's invalid, so the same error
        is not reported again for every element of the namespace.
        """
        if not self.registry.is_recognizable(uri):
            nearest = self.registry.find_nearest(uri)
            msg = _("unsupported binding namespace {!r}, perhaps you meant {!r}?")
            self.error(msg.format(uri, nearest))
        elif not self.registry.is_supported(uri):
            owner = self.registry.find_owner(uri)
            if owner is not None:
                msg = _("vendor extension namespace {!r} is recognized by the plugin "
                        "{!r}, but the plugin is not enabled: did you forget the "
                        "option {!r}?")
                self.error(msg.format(uri, owner.option_name, f'-{owner.option_name}'))
            else:
                logger.warning("No plugin claims the recognizable namespace %r", uri)
                self.error(_("unsupported binding namespace {!r}").format(uri))

        if uri not in self._enabled_extensions:
            logger.debug("Enable extension namespace %r", uri)
            self._enabled_extensions.add(uri)

    def verify_tag_name(self, namespace: str, local_name: str,
                        qname: Optional[str] = None) -> None:
        """
        If the tag name belongs to a plugin namespace checks that its local name
        is recognized by an active plugin. An unrecognized element is reported
        and its subtree is cut.
        """
        if namespace in self.registry.plugin_uris:
            if not self.registry.accepts_tag_name(namespace, local_name):
                if qname is None:
                    qname = get_prefixed_qname(f'{{{namespace}}}{local_name}',
                                               self.ns_scope.namespaces)
                self.error(_("unsupported customization {!r}").format(qname))
                self.cutter.start_cutting()

    ###
    # Diagnostics
    def error(self, message: str) -> ExtensionBindingError:
        """Reports an error and returns the created diagnostic."""
        exc = ExtensionBindingError(
            message, self._locator, getattr(self._locator, 'elem', None),
            self.ns_scope.namespaces,
        )
        logger.debug("Report error: %s", message)
        self.error_handler.error(exc)
        return exc

    def warning(self, message: str) -> ExtensionBindingWarning:
        """Reports a warning and returns the created diagnostic."""
        exc = ExtensionBindingWarning(
            message, self._locator, getattr(self._locator, 'elem', None),
            self.ns_scope.namespaces,
        )
        logger.debug("Report warning: %s", message)
        self.error_handler.warning(exc)
        return exc

    ###
    # ContentHandler interface
    def setDocumentLocator(self, locator: Locator) -> None:
        super().setDocumentLocator(locator)
        self.cutter.setDocumentLocator(locator)

    def startDocument(self) -> None:
        self.ns_scope.reset()
        self._enabled_extensions.clear()
        self.cutter.startDocument()

    def endDocument(self) -> None:
        self.cutter.endDocument()

    def startPrefixMapping(self, prefix: Optional[str], uri: str) -> None:
        self.cutter.startPrefixMapping(prefix, uri)
        self.ns_scope.push_scope()
        self.ns_scope.bind(prefix, uri)

    def endPrefixMapping(self, prefix: Optional[str]) -> None:
        self.cutter.endPrefixMapping(prefix)
        self.ns_scope.pop_scope()

    def startElement(self, name: str, attrs: Any) -> None:
        self.cutter.startElement(name, attrs)

    def endElement(self, name: str) -> None:
        self.cutter.endElement(name)

    def startElementNS(self, name: NameType, qname: Optional[str], attrs: Any) -> None:
        self.cutter.startElementNS(name, qname, attrs)

    def endElementNS(self, name: NameType, qname: Optional[str]) -> None:
        self.cutter.endElementNS(name, qname)

    def characters(self, content: str) -> None:
        self.cutter.characters(content)

    def ignorableWhitespace(self, whitespace: str) -> None:
        self.cutter.ignorableWhitespace(whitespace)

    def processingInstruction(self, target: str, data: str) -> None:
        self.cutter.processingInstruction(target, data)

    def skippedEntity(self, name: str) -> None:
        self.cutter.skippedEntity(name)


class XsdExtensionBindingChecker(ExtensionBindingChecker):
    """
    Checks the vendor extensions of XSD schemas and external binding files.
    The extension namespaces are enabled by the JAXB attribute
    *extensionBindingPrefixes*, the elements of recognizable extensions that
    are not enabled are ignored with a warning and their subtree is cut.
    """
    def __init__(self, registry: ExtensionRegistry,
                 error_handler: ErrorHandler,
                 handler: Optional[ContentHandler] = None,
                 cutter: Optional[Any] = None,
                 allow_extensions: bool = False) -> None:
        super().__init__(XSD_NAMESPACE, registry, error_handler,
                         handler, cutter, allow_extensions)

    def needs_to_be_pruned(self, uri: str) -> bool:
        """
        Returns `True` if the elements of the namespace have to be blocked.
        Foreign elements not recognized as extensions, e.g. documentation,
        are left to the downstream handler.
        """
        if uri == self.schema_language or uri == JAXB_NAMESPACE:
            return False
        elif uri in self._enabled_extensions:
            return False
        return self.registry.is_recognizable(uri)

    def enable_prefixes(self, value: str) -> None:
        """Enables the extensions of a list of prefixes of the current scope."""
        if not self.allow_extensions:
            self.error(_("the attribute 'extensionBindingPrefixes' "
                         "can be used only in extension mode"))
            return

        for prefix in value.split():
            uri = self.ns_scope.resolve('' if prefix == '#default' else prefix)
            if uri is None:
                self.error(_("prefix {!r} is not declared").format(prefix))
            else:
                self.check_and_enable(uri)

    def startElementNS(self, name: NameType, qname: Optional[str], attrs: Any) -> None:
        if not self.cutter.is_cutting:
            namespace, local_name = split_ns_name(name)

            value = attrs.get((JAXB_NAMESPACE, 'extensionBindingPrefixes'))
            if value is not None:
                self.enable_prefixes(value)

            if self.needs_to_be_pruned(namespace):
                msg = _("vendor extension namespace {!r} is ignored because it's not "
                        "listed in the attribute 'extensionBindingPrefixes'")
                self.warning(msg.format(namespace))
                self.cutter.start_cutting()
            else:
                self.verify_tag_name(namespace, local_name, qname)

        super().startElementNS(name, qname, attrs)


class DtdExtensionBindingChecker(ExtensionBindingChecker):
    """
    Checks the vendor extensions of DTD binding files, whose standard
    elements have no namespace. Any element with a namespace is a vendor
    extension, enabled at its first occurrence in the document.
    """
    def __init__(self, registry: ExtensionRegistry,
                 error_handler: ErrorHandler,
                 handler: Optional[ContentHandler] = None,
                 cutter: Optional[Any] = None,
                 allow_extensions: bool = False) -> None:
        super().__init__(DTD_NAMESPACE, registry, error_handler,
                         handler, cutter, allow_extensions)
        self._rejected_extensions: set[str] = set()

    def startDocument(self) -> None:
        self._rejected_extensions.clear()
        super().startDocument()

    def startElementNS(self, name: NameType, qname: Optional[str], attrs: Any) -> None:
        namespace, local_name = split_ns_name(name)

        if self.cutter.is_cutting or namespace in (self.schema_language, JAXB_NAMESPACE):
            pass
        elif not self.allow_extensions:
            if namespace not in self._rejected_extensions:
                self._rejected_extensions.add(namespace)
                msg = _("vendor extension namespace {!r} can't be used in strict mode")
                self.error(msg.format(namespace))
            self.cutter.start_cutting()
        else:
            if namespace not in self._enabled_extensions:
                self.check_and_enable(namespace)
            self.verify_tag_name(namespace, local_name, qname)

        super().startElementNS(name, qname, attrs)
