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
This module contains the read-only registry view of the vendor extensions.
"""
from collections.abc import Iterable
from typing import Optional

from extbinding.exceptions import ExtBindingTypeError, ExtBindingValueError
from extbinding.names import XJC_EXTENSION_NAMESPACE
from extbinding.plugins import ExtensionPlugin
from extbinding.translation import gettext as _
from extbinding.utils.misc import find_nearest


class ExtensionRegistry:
    """
    A read-only view of the plugins available in a session, built once and
    shareable between checker instances.

    :param plugins: the available plugins, in declaration order.
    :param enabled: option names of plugins to consider active in addition \
    to the plugins that have the *active* flag set.
    :param intrinsic_uri: the namespace URI of the intrinsic extensions, that \
    is always supported.
    """
    __slots__ = ('_plugins', '_active_plugins', '_recognizable_uris',
                 '_plugin_uris', '_intrinsic_uri')

    def __init__(self, plugins: Iterable[ExtensionPlugin] = (),
                 enabled: Iterable[str] = (),
                 intrinsic_uri: str = XJC_EXTENSION_NAMESPACE) -> None:

        self._plugins = tuple(plugins)
        for plugin in self._plugins:
            if not isinstance(plugin, ExtensionPlugin):
                msg = _("invalid type {!r} for a plugin, must be an {!r} instance")
                raise ExtBindingTypeError(msg.format(type(plugin), ExtensionPlugin))

        option_names = {p.option_name for p in self._plugins}
        enabled = set(enabled)
        for name in enabled:
            if name not in option_names:
                raise ExtBindingValueError(_("unknown plugin option {!r}").format(name))

        self._active_plugins = tuple(
            p for p in self._plugins if p.active or p.option_name in enabled
        )
        self._intrinsic_uri = intrinsic_uri

        recognizable_uris = {intrinsic_uri}
        for plugin in self._plugins:
            recognizable_uris.update(plugin.customization_uris)
        self._recognizable_uris = frozenset(recognizable_uris)

        plugin_uris: set[str] = set()
        for plugin in self._active_plugins:
            plugin_uris.update(plugin.customization_uris)
        self._plugin_uris = frozenset(plugin_uris)

    def __repr__(self) -> str:
        return '%s(plugins=%r, enabled=%r)' % (
            self.__class__.__name__,
            [p.option_name for p in self._plugins],
            [p.option_name for p in self._active_plugins],
        )

    @property
    def plugins(self) -> tuple[ExtensionPlugin, ...]:
        return self._plugins

    @property
    def active_plugins(self) -> tuple[ExtensionPlugin, ...]:
        return self._active_plugins

    @property
    def intrinsic_uri(self) -> str:
        return self._intrinsic_uri

    @property
    def recognizable_uris(self) -> frozenset[str]:
        """Namespace URIs claimed by any available plugin, plus the intrinsic one."""
        return self._recognizable_uris

    @property
    def plugin_uris(self) -> frozenset[str]:
        """Namespace URIs claimed by active plugins."""
        return self._plugin_uris

    def is_recognizable(self, uri: str) -> bool:
        """Checks if the namespace URI can be potentially recognized."""
        return uri in self._recognizable_uris

    def is_supported(self, uri: str) -> bool:
        """Checks if the namespace URI is supported by an active plugin or is intrinsic."""
        return uri == self._intrinsic_uri or uri in self._plugin_uris

    def find_owner(self, uri: str) -> Optional[ExtensionPlugin]:
        """Returns the first plugin, active or not, that claims the namespace URI."""
        for plugin in self._plugins:
            if uri in plugin.customization_uris:
                return plugin
        return None

    def find_nearest(self, uri: str) -> str:
        """
        Returns the recognizable namespace URI nearest to the argument, or an
        empty string if there are no recognizable URIs.
        """
        return find_nearest(uri, self._recognizable_uris)

    def accepts_tag_name(self, namespace: str, local_name: str) -> bool:
        """Checks if any active plugin recognizes the customization tag name."""
        return any(p.is_customization_tag_name(namespace, local_name)
                   for p in self._active_plugins)
