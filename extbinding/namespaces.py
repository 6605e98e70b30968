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
This module contains a tracker of in-scope namespace declarations.
"""
from collections.abc import Iterator, Mapping
from typing import Optional

from extbinding.exceptions import ExtBindingKeyError
from extbinding.names import XML_NAMESPACE


class NamespaceScope(Mapping[str, str]):
    """
    A stack of namespace declaration frames, that grows and shrinks with the
    nesting of the document. Each frame maps prefixes to namespace URIs and
    the empty prefix is used for the default namespace. The mapping interface
    gives a view of the bindings currently visible, where an inner declaration
    hides the outer declarations of the same prefix.

    The prefix 'xml' is always bound to the XML namespace. A prefix bound to
    the empty URI, e.g. an undeclaration with `xmlns=""`, is unbound.
    """
    __slots__ = ('_frames',)

    _frames: list[dict[str, str]]

    def __init__(self) -> None:
        self._frames = [{'xml': XML_NAMESPACE}, {}]

    def __getitem__(self, prefix: str) -> str:
        uri = self.resolve(prefix)
        if uri is None:
            raise ExtBindingKeyError(prefix)
        return uri

    def __iter__(self) -> Iterator[str]:
        yield from self.namespaces

    def __len__(self) -> int:
        return len(self.namespaces)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self.namespaces)

    @property
    def depth(self) -> int:
        """The number of frames opened with push_scope()."""
        return len(self._frames) - 2

    @property
    def namespaces(self) -> dict[str, str]:
        """A new dictionary with the namespace bindings currently visible."""
        namespaces: dict[str, str] = {}
        for frame in self._frames:
            namespaces.update(frame)
        return {k: v for k, v in namespaces.items() if v}

    def reset(self) -> None:
        """Removes all the frames and their bindings."""
        del self._frames[1:]
        self._frames.append({})

    def push_scope(self) -> None:
        """Opens a new frame for namespace bindings."""
        self._frames.append({})

    def pop_scope(self) -> None:
        """Discards the most recently opened frame. The document frame is never removed."""
        if len(self._frames) > 2:
            self._frames.pop()

    def bind(self, prefix: Optional[str], uri: Optional[str]) -> None:
        """
        Declares a binding in the current frame, visible also in nested frames.

        :param prefix: the namespace prefix, `None` or '' for the default namespace.
        :param uri: the namespace URI, `None` or '' for undeclaring the prefix.
        """
        self._frames[-1][prefix or ''] = uri or ''

    def resolve(self, prefix: Optional[str]) -> Optional[str]:
        """
        Returns the URI bound to a prefix in the nearest enclosing frame,
        or `None` if the prefix is not bound.
        """
        prefix = prefix or ''
        for frame in reversed(self._frames):
            if prefix in frame:
                return frame[prefix] or None
        return None
