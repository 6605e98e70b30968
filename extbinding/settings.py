#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Settings of extension binding checks."""
from dataclasses import dataclass, asdict
from typing import Any, Optional

from extbinding.names import SCHEMA_LANGUAGES
from extbinding.utils.descriptors import Option, BooleanOption, ChoiceOption, IntOption

COMPATIBILITY_MODES = frozenset(('strict', 'extension'))


@dataclass
class CheckerSettings:
    """Settings for checking vendor extensions in binding documents."""

    compatibility_mode: Option[str] = ChoiceOption(
        default='strict', choices=sorted(COMPATIBILITY_MODES)
    )
    """
    The compatibility mode. With 'strict', the default, any use of vendor
    extensions is reported as an error. Provide 'extension' to allow the
    use of the extensions of enabled plugins.
    """

    schema_language: Option[str] = ChoiceOption(
        default='xsd', choices=tuple(SCHEMA_LANGUAGES)
    )
    """The schema language of the binding documents, can be 'xsd' or 'dtd'."""

    defuse: Option[bool] = BooleanOption(default=True)
    """If `True` entity declarations and external references are forbidden."""

    max_errors: Option[Optional[int]] = IntOption(default=None, min_value=1, nullable=True)
    """
    The maximum number of errors collected before aborting the processing
    of a document. For default there is no limit.
    """

    @property
    def allow_extensions(self) -> bool:
        return self.compatibility_mode != 'strict'

    @classmethod
    def get_settings(cls, **kwargs: Any) -> 'CheckerSettings':
        """Returns a new settings object, using global settings for missing options."""
        options = asdict(checker_settings)
        options.update((k, v) for k, v in kwargs.items() if v is not None)
        return cls(**options)

    def set_options(self, **kwargs: Any) -> None:
        """Set options for settings object."""
        type(self)(**kwargs)
        for name, value in kwargs.items():
            setattr(self, f'_{name}', value)

    def reset(self) -> None:
        """Reset settings to default values."""
        self.set_options(**asdict(type(self)()))


checker_settings = CheckerSettings()  # Active settings for extension binding checks
