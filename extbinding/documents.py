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
This module contains the API for checking the vendor extensions of binding documents.
"""
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional
from xml.sax import SAXParseException
from xml.sax.handler import ContentHandler

from extbinding.checkers import ExtensionBindingChecker, XsdExtensionBindingChecker, \
    DtdExtensionBindingChecker
from extbinding.diagnostics import DiagnosticCollector
from extbinding.exceptions import ExtBindingAbort
from extbinding.plugins import ExtensionPlugin
from extbinding.registry import ExtensionRegistry
from extbinding.sax import SourceType, parse_source, saxify
from extbinding.settings import CheckerSettings
from extbinding.utils.etree import is_etree_document, is_etree_element
from extbinding.utils.logger import logged

logger = logging.getLogger('extbinding')

CHECKER_CLASSES: dict[str, type[ExtensionBindingChecker]] = {
    'xsd': XsdExtensionBindingChecker,
    'dtd': DtdExtensionBindingChecker,
}


def get_checker(registry: ExtensionRegistry,
                error_handler: DiagnosticCollector,
                handler: Optional[ContentHandler] = None,
                settings: Optional[CheckerSettings] = None) -> ExtensionBindingChecker:
    """Returns a new checker instance for a document traversal."""
    if settings is None:
        settings = CheckerSettings.get_settings()

    checker_class = CHECKER_CLASSES[settings.schema_language]
    return checker_class(
        registry=registry,
        error_handler=error_handler,
        handler=handler,
        allow_extensions=settings.allow_extensions,
    )


@logged
def check_bindings(source: SourceType,
                   plugins: Iterable[ExtensionPlugin] = (),
                   enabled: Iterable[str] = (),
                   registry: Optional[ExtensionRegistry] = None,
                   schema_language: Optional[str] = None,
                   compatibility_mode: Optional[str] = None,
                   handler: Optional[ContentHandler] = None,
                   namespaces: Optional[Mapping[str, str]] = None,
                   defuse: Optional[bool] = None,
                   max_errors: Optional[int] = None,
                   loglevel: Optional[int] = None) -> DiagnosticCollector:
    """
    Checks the vendor extensions of a binding document, returning a collector
    with the reported errors and warnings.

    :param source: the binding document. Can be a file path, a `Path`, a string \
    containing XML data, bytes, a file-like object, an ElementTree or an Element.
    :param plugins: the available plugins, used if no registry is provided.
    :param enabled: option names of plugins to enable, used if no registry is provided.
    :param registry: an optional registry view, shareable between checks.
    :param schema_language: the schema language of the document, 'xsd' or 'dtd'.
    :param compatibility_mode: 'strict' or 'extension'.
    :param handler: an optional content handler that receives the events \
    filtered by the checker.
    :param namespaces: namespace declarations for ElementTree sources.
    :param defuse: if `True` entity declarations and external references are forbidden.
    :param max_errors: stop the check after this number of errors.
    :param loglevel: for setting a different logging level for the check.
    """
    settings = CheckerSettings.get_settings(
        schema_language=schema_language,
        compatibility_mode=compatibility_mode,
        defuse=defuse,
        max_errors=max_errors,
    )
    if registry is None:
        registry = ExtensionRegistry(plugins, enabled)

    collector = DiagnosticCollector(settings.max_errors)
    checker = get_checker(registry, collector, handler, settings)
    logger.debug("Check bindings of %r with %r", source, checker)

    try:
        if is_etree_document(source) or is_etree_element(source):
            saxify(source, checker, namespaces)
        else:
            parse_source(source, checker, settings.defuse)
    except ExtBindingAbort as err:
        logger.debug("Check aborted: %s", err)

    return collector


def iter_errors(source: SourceType, *args: Any, **kwargs: Any) -> Iterator[SAXParseException]:
    """
    Yields the errors reported checking the vendor extensions of a binding
    document. Takes the same arguments of :meth:`check_bindings`.
    """
    yield from check_bindings(source, *args, **kwargs).errors


def validate(source: SourceType, *args: Any, **kwargs: Any) -> None:
    """
    Checks the vendor extensions of a binding document, raising the first
    error found. Takes the same arguments of :meth:`check_bindings`.
    """
    for error in iter_errors(source, *args, **kwargs):
        raise error


def is_valid(source: SourceType, *args: Any, **kwargs: Any) -> bool:
    """
    Returns `True` if the vendor extensions of a binding document are valid.
    Takes the same arguments of :meth:`check_bindings`.
    """
    return next(iter_errors(source, *args, **kwargs), None) is None
