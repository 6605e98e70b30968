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
This module contains a SAX filter for discarding subtrees of a document.
"""
import logging
from typing import Any, Optional
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import Locator

logger = logging.getLogger('extbinding')


class SubtreeCutter(ContentHandler):
    """
    A content handler that forwards the events to a downstream handler and
    that can discard a subtree, from the start of an element to its matching
    end. Calling :meth:`start_cutting` the element started by the next start
    event is discarded together with all its descendants.

    :param handler: the downstream content handler. If not provided the \
    events are only consumed.
    """
    def __init__(self, handler: Optional[ContentHandler] = None) -> None:
        super().__init__()
        self.handler = handler if handler is not None else ContentHandler()
        self._cut_depth = 0

    def __repr__(self) -> str:
        return '%s(handler=%r)' % (self.__class__.__name__, self.handler)

    @property
    def is_cutting(self) -> bool:
        return self._cut_depth > 0

    def start_cutting(self) -> None:
        """Begins discarding events from the next started element."""
        logger.debug("Start cutting a subtree")
        self._cut_depth = 1

    def _enter(self) -> bool:
        if self._cut_depth:
            self._cut_depth += 1
            return False
        return True

    def _exit(self) -> bool:
        if not self._cut_depth:
            return True

        self._cut_depth -= 1
        if self._cut_depth == 1:
            self._cut_depth = 0
        return False

    def setDocumentLocator(self, locator: Locator) -> None:
        super().setDocumentLocator(locator)
        self.handler.setDocumentLocator(locator)

    def startDocument(self) -> None:
        self._cut_depth = 0
        self.handler.startDocument()

    def endDocument(self) -> None:
        self.handler.endDocument()

    def startPrefixMapping(self, prefix: Optional[str], uri: str) -> None:
        if not self._cut_depth:
            self.handler.startPrefixMapping(prefix, uri)

    def endPrefixMapping(self, prefix: Optional[str]) -> None:
        if not self._cut_depth:
            self.handler.endPrefixMapping(prefix)

    def startElement(self, name: str, attrs: Any) -> None:
        if self._enter():
            self.handler.startElement(name, attrs)

    def endElement(self, name: str) -> None:
        if self._exit():
            self.handler.endElement(name)

    def startElementNS(self, name: tuple[Optional[str], str],
                       qname: Optional[str], attrs: Any) -> None:
        if self._enter():
            self.handler.startElementNS(name, qname, attrs)

    def endElementNS(self, name: tuple[Optional[str], str], qname: Optional[str]) -> None:
        if self._exit():
            self.handler.endElementNS(name, qname)

    def characters(self, content: str) -> None:
        if not self._cut_depth:
            self.handler.characters(content)

    def ignorableWhitespace(self, whitespace: str) -> None:
        if not self._cut_depth:
            self.handler.ignorableWhitespace(whitespace)

    def processingInstruction(self, target: str, data: str) -> None:
        if not self._cut_depth:
            self.handler.processingInstruction(target, data)

    def skippedEntity(self, name: str) -> None:
        if not self._cut_depth:
            self.handler.skippedEntity(name)
