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
This module contains the plugin interface for vendor extensions.
"""
import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Collection, Iterable, Mapping
from importlib.metadata import entry_points
from typing import Optional

from extbinding.exceptions import ExtBindingTypeError, ExtBindingValueError
from extbinding.translation import gettext as _

logger = logging.getLogger('extbinding')

PLUGINS_ENTRY_POINT_GROUP = 'extbinding.plugins'


class ExtensionPlugin(metaclass=ABCMeta):
    """
    Abstract base class of plugins that add vendor extensions to binding
    documents. A plugin is identified by its option name, claims a set of
    customization namespace URIs and recognizes a set of tag names within
    these namespaces.

    :param active: if `True` the plugin is enabled.
    """
    active: bool = False
    usage: str = ''

    def __init__(self, active: bool = False) -> None:
        self.active = active

    def __repr__(self) -> str:
        return '%s(option_name=%r, active=%r)' % (
            self.__class__.__name__, self.option_name, self.active
        )

    @property
    @abstractmethod
    def option_name(self) -> str:
        """The option name that identifies and enables the plugin, e.g. 'Xlocator'."""

    @property
    def customization_uris(self) -> frozenset[str]:
        """The namespace URIs of the customizations recognized by the plugin."""
        return frozenset()

    def is_customization_tag_name(self, namespace: str, local_name: str) -> bool:
        """
        Returns `True` if the qualified name is a customization element
        recognized by the plugin.

        :param namespace: the namespace URI of the element.
        :param local_name: the local name of the element.
        """
        return False


class SimpleExtensionPlugin(ExtensionPlugin):
    """
    A plugin defined by a fixed map of namespace URIs to tag names.

    :param option_name: the option name of the plugin.
    :param tag_names: a map from customization namespace URIs to the local \
    names of the recognized customization elements.
    :param active: if `True` the plugin is enabled.
    :param usage: an optional usage description.
    """
    def __init__(self, option_name: str,
                 tag_names: Mapping[str, Collection[str]],
                 active: bool = False,
                 usage: str = '') -> None:
        if not isinstance(option_name, str):
            msg = _("invalid type {!r} for plugin option name, must be a string")
            raise ExtBindingTypeError(msg.format(type(option_name)))
        elif not option_name.strip():
            raise ExtBindingValueError(_("the option name of a plugin can't be empty"))

        super().__init__(active)
        self._option_name = option_name
        self.usage = usage
        self._tag_names = {uri: frozenset(names) for uri, names in tag_names.items()}

    @property
    def option_name(self) -> str:
        return self._option_name

    @property
    def customization_uris(self) -> frozenset[str]:
        return frozenset(self._tag_names)

    def is_customization_tag_name(self, namespace: str, local_name: str) -> bool:
        try:
            return local_name in self._tag_names[namespace]
        except KeyError:
            return False


def load_plugins(enabled: Optional[Iterable[str]] = None,
                 group: str = PLUGINS_ENTRY_POINT_GROUP) -> list[ExtensionPlugin]:
    """
    Loads the plugins registered as entry points of installed distributions.
    An entry point can refer to a subclass of :class:`ExtensionPlugin`, that
    is instantiated without arguments, or to a plugin instance.

    :param enabled: the option names of the plugins to activate.
    :param group: the entry point group.
    """
    enabled = set(enabled or ())
    plugins: list[ExtensionPlugin] = []

    for ep in entry_points(group=group):
        obj = ep.load()
        if isinstance(obj, type) and issubclass(obj, ExtensionPlugin):
            plugin = obj()
        elif isinstance(obj, ExtensionPlugin):
            plugin = obj
        else:
            msg = _("entry point {!r} doesn't refer to an extension plugin")
            raise ExtBindingTypeError(msg.format(ep.name))

        if plugin.option_name in enabled:
            plugin.active = True
        logger.debug("Loaded plugin %r from entry point %r", plugin, ep.name)
        plugins.append(plugin)

    return plugins
