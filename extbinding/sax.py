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
This module contains the sources of SAX events for binding documents.
"""
import io
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union
from xml.sax import SAXParseException
from xml.sax import expatreader  # type: ignore[attr-defined, unused-ignore]
from xml.sax.handler import ContentHandler, feature_namespaces
from xml.sax.xmlreader import AttributesNSImpl, InputSource, Locator

from extbinding.exceptions import ExtBindingForbidden, ExtBindingOSError, \
    ExtBindingParseError, ExtBindingTypeError, ExtensionBindingError
from extbinding.translation import gettext as _
from extbinding.utils.etree import is_etree_comment_or_pi, is_etree_document, \
    is_etree_element, is_lxml_element
from extbinding.utils.qnames import get_namespace, get_prefixed_qname, local_name

SourceType = Union[str, bytes, Path, io.StringIO, io.BytesIO, Any]


class SafeExpatParser(expatreader.ExpatParser):  # type: ignore[misc, unused-ignore]
    """An expat SAX reader that forbids entity declarations and external references."""

    def forbid_entity_declaration(self, name, is_parameter_entity,  # type: ignore
                                  value, base, sysid, pubid, notation_name):
        raise ExtBindingForbidden(f"Entities are forbidden (entity_name={name!r})")

    def forbid_unparsed_entity_declaration(self, name, base,  # type: ignore
                                           sysid, pubid, notation_name):
        raise ExtBindingForbidden(f"Unparsed entities are forbidden (entity_name={name!r})")

    def forbid_external_entity_reference(self, context, base, sysid, pubid):  # type: ignore
        raise ExtBindingForbidden(
            f"External references are forbidden (system_id={sysid!r}, public_id={pubid!r})"
        )  # pragma: no cover

    def reset(self) -> None:
        super().reset()
        self._parser.EntityDeclHandler = self.forbid_entity_declaration
        self._parser.UnparsedEntityDeclHandler = self.forbid_unparsed_entity_declaration
        self._parser.ExternalEntityRefHandler = self.forbid_external_entity_reference


def create_parser(defuse: bool = True) -> expatreader.ExpatParser:
    """
    Creates a namespace-aware SAX reader.

    :param defuse: if `True` creates a reader that forbids entities.
    """
    parser = SafeExpatParser() if defuse else expatreader.ExpatParser()
    parser.setFeature(feature_namespaces, True)
    return parser


def parse_source(source: SourceType, handler: ContentHandler, defuse: bool = True) -> None:
    """
    Parses a binding document, sending the events to a content handler.

    :param source: a file path, a `Path` instance, a string containing XML data, \
    bytes or a file-like object.
    :param handler: the content handler that receives the events.
    :param defuse: if `True` entity declarations and external references are forbidden.
    """
    input_source: Union[InputSource, Any]

    if isinstance(source, str) and source.lstrip().startswith('<'):
        input_source = InputSource()
        input_source.setCharacterStream(io.StringIO(source))
    elif isinstance(source, (str, Path)):
        try:
            fp = open(source, 'rb')
        except OSError as err:
            raise ExtBindingOSError(err) from err

        with fp:
            input_source = InputSource(str(source))
            input_source.setByteStream(fp)
            _parse(input_source, handler, defuse)
        return
    elif isinstance(source, bytes):
        input_source = InputSource()
        input_source.setByteStream(io.BytesIO(source))
    elif hasattr(source, 'read'):
        input_source = source
    else:
        msg = _("invalid type {!r} for source, must be a string containing the XML "
                "document or file path or a Path or bytes or a file like object")
        raise ExtBindingTypeError(msg.format(type(source)))

    _parse(input_source, handler, defuse)


def _parse(input_source: Any, handler: ContentHandler, defuse: bool) -> None:
    parser = create_parser(defuse)
    parser.setContentHandler(handler)
    try:
        parser.parse(input_source)
    except ExtensionBindingError:
        raise
    except SAXParseException as err:
        raise ExtBindingParseError(_("invalid XML syntax: {}").format(err)) from err
    except OSError as err:
        raise ExtBindingOSError(err) from err


class ElementLocator(Locator):
    """
    A SAX locator for events generated from an ElementTree structure. Line
    numbers are available only for lxml elements.
    """
    def __init__(self, system_id: Optional[str] = None) -> None:
        self.elem: Optional[Any] = None
        self.system_id = system_id

    def getLineNumber(self) -> int:
        lineno = getattr(self.elem, 'sourceline', None)
        return lineno if isinstance(lineno, int) else -1

    def getSystemId(self) -> Optional[str]:
        return self.system_id


def saxify(source: Any, handler: ContentHandler,
           namespaces: Optional[Mapping[str, str]] = None,
           system_id: Optional[str] = None) -> None:
    """
    Sends the events of an ElementTree structure to a content handler.

    :param source: an Element or an ElementTree of ElementTree or lxml.
    :param handler: the content handler that receives the events.
    :param namespaces: namespace declarations of the root element, used \
    for ElementTree elements that don't keep the declarations. For lxml \
    elements the declarations are taken from the elements.
    :param system_id: an optional system id for the diagnostics.
    """
    if is_etree_document(source):
        root = source.getroot()
    elif is_etree_element(source):
        root = source
    else:
        msg = _("invalid type {!r} for source, must be an ElementTree or an Element")
        raise ExtBindingTypeError(msg.format(type(source)))

    locator = ElementLocator(system_id)
    handler.setDocumentLocator(locator)
    handler.startDocument()
    _saxify_element(root, handler, locator, {}, namespaces or {})
    handler.endDocument()


def _saxify_element(elem: Any, handler: ContentHandler, locator: ElementLocator,
                    scope: dict[str, str], namespaces: Mapping[str, str]) -> None:
    if is_etree_comment_or_pi(elem):
        return

    if is_lxml_element(elem):
        declarations = {
            prefix or '': uri for prefix, uri in elem.nsmap.items()
            if scope.get(prefix or '') != uri
        }
    elif not scope:
        declarations = {prefix or '': uri for prefix, uri in namespaces.items()}
    else:
        declarations = {}

    if declarations:
        scope = {**scope, **declarations}

    for prefix, uri in declarations.items():
        handler.startPrefixMapping(prefix or None, uri)

    namespace = get_namespace(elem.tag)
    name = (namespace or None, local_name(elem.tag))
    qname = get_prefixed_qname(elem.tag, scope)

    attrs: dict[tuple[Optional[str], str], str] = {}
    qnames: dict[tuple[Optional[str], str], str] = {}
    for key, value in elem.attrib.items():
        attr_name = (get_namespace(key) or None, local_name(key))
        attrs[attr_name] = value
        qnames[attr_name] = get_prefixed_qname(key, scope, use_empty=False)

    locator.elem = elem
    handler.startElementNS(name, qname, AttributesNSImpl(attrs, qnames))
    if elem.text:
        handler.characters(elem.text)

    for child in elem:
        _saxify_element(child, handler, locator, scope, namespaces)
        if child.tail:
            handler.characters(child.tail)

    locator.elem = elem
    handler.endElementNS(name, qname)

    for prefix in reversed(declarations):
        handler.endPrefixMapping(prefix or None)
