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
This module contains a diagnostic sink for collecting the errors and the warnings.
"""
import logging
from typing import Optional
from xml.sax import SAXParseException
from xml.sax.handler import ErrorHandler

from extbinding.exceptions import ExtBindingAbort
from extbinding.translation import gettext as _

logger = logging.getLogger('extbinding')


class DiagnosticCollector(ErrorHandler):
    """
    A SAX error handler that collects the reported diagnostics.

    :param max_errors: if provided, an :class:`ExtBindingAbort` is raised \
    when the number of collected errors reaches this limit.
    """
    def __init__(self, max_errors: Optional[int] = None) -> None:
        self.max_errors = max_errors
        self.errors: list[SAXParseException] = []
        self.warnings: list[SAXParseException] = []

    def __repr__(self) -> str:
        return '%s(errors=%d, warnings=%d)' % (
            self.__class__.__name__, len(self.errors), len(self.warnings)
        )

    def clear(self) -> None:
        self.errors.clear()
        self.warnings.clear()

    def error(self, exception: SAXParseException) -> None:
        logger.info("%s", exception.getMessage())
        self.errors.append(exception)
        if self.max_errors is not None and len(self.errors) >= self.max_errors:
            msg = _("too many errors, processing stopped after {} errors")
            raise ExtBindingAbort(msg.format(len(self.errors)), self.errors)

    def fatalError(self, exception: SAXParseException) -> None:
        """Collects a not recoverable error and raises it, ending the processing."""
        self.errors.append(exception)
        raise exception

    def warning(self, exception: SAXParseException) -> None:
        logger.info("%s", exception.getMessage())
        self.warnings.append(exception)
