#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from collections.abc import Iterable
from dataclasses import is_dataclass
from typing import Any, cast, Generic, Optional, TypeVar

from extbinding.exceptions import ExtBindingAttributeError, ExtBindingTypeError, \
    ExtBindingValueError
from extbinding.translation import gettext as _

__all__ = ['Attribute', 'Option', 'Argument', 'StringOption', 'BooleanOption',
           'IntOption', 'ChoiceOption']

T = TypeVar('T')


class Attribute(Generic[T]):
    """
    A descriptor for handling validated protected attributes.
    """
    __slots__ = ('_name', '_owner')

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self._name = f'_{name}'
        self._owner = owner

    def __str__(self) -> str:
        return _('attribute {!r}').format(self._name[1:])

    def __get__(self, instance: Optional[Any], owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            if instance is None:
                msg = _("{} can't be accessed from {!r}").format(self, owner)
            else:
                msg = _("{} of {!r} object has not been set").format(self, instance)
            raise ExtBindingAttributeError(msg) from None

    def __set__(self, instance: Any, value: Any) -> None:
        setattr(instance, self._name, self.validated_value(value))

    def __delete__(self, instance: Any) -> None:
        raise ExtBindingAttributeError(_("can't delete {}").format(self))

    def validated_value(self, value: Any) -> T:
        return cast(T, value)

    def _validate_choice(self, value: T, choices: Iterable[T]) -> None:
        if value not in choices:
            msg = _("invalid value {!r} for {}: must be one of {}")
            raise ExtBindingValueError(msg.format(value, self, tuple(choices)))

    def _validate_minimum(self, value: T, min_value: Any) -> None:
        if value < min_value:
            msg = _("the value of {} must be greater or equal than {}")
            raise ExtBindingValueError(msg.format(self, min_value))


class Argument(Attribute[T]):
    """
    A descriptor for positional arguments. An argument can't be changed nor deleted.
    """
    def __str__(self) -> str:
        return _('argument {!r}').format(self._name[1:])

    def __set__(self, instance: Any, value: Any) -> None:
        if hasattr(instance, self._name):
            raise ExtBindingAttributeError(_("can't change {}").format(self))
        setattr(instance, self._name, self.validated_value(value))


class Option(Argument[T]):
    """
    A descriptor for handling optional arguments and settings options. If bound
    to a dataclass it's considered an option and can be changed, otherwise it's
    considered to be an optional argument and cannot be changed.

    :param default: The default value for the option/optional argument.
    """
    __slots__ = ('_default',)

    def __init__(self, *, default: T) -> None:
        self._default = default

    def __str__(self) -> str:
        if is_dataclass(self._owner):
            return _('option {!r}').format(self._name[1:])
        return _('optional argument {!r}').format(self._name[1:])

    def __get__(self, instance: Any, owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            return self._default

    def __set__(self, instance: Any, value: Any) -> None:
        if hasattr(instance, self._name) and not is_dataclass(self._owner):
            raise ExtBindingAttributeError(_("can't change {}").format(self))
        setattr(instance, self._name, self.validated_value(value))


class BooleanOption(Option[bool]):
    def validated_value(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        msg = _("invalid type {!r} for {}, must be of type {!r}")
        raise ExtBindingTypeError(msg.format(type(value), self, bool))


class StringOption(Option[str]):
    def validated_value(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        msg = _("invalid type {!r} for {}, must be of type {!r}")
        raise ExtBindingTypeError(msg.format(type(value), self, str))


class ChoiceOption(StringOption):
    """A string option restricted to a fixed set of values."""
    __slots__ = ('_choices',)

    def __init__(self, *, default: str, choices: Iterable[str]) -> None:
        self._choices = tuple(choices)
        super().__init__(default=default)

    def validated_value(self, value: Any) -> str:
        super().validated_value(value)
        self._validate_choice(value, self._choices)
        return cast(str, value)


class IntOption(Option[Optional[int]]):
    __slots__ = ('_min_value', '_nullable')

    def __init__(self, *, default: Optional[int],
                 min_value: Optional[int] = None,
                 nullable: bool = False) -> None:
        self._min_value = min_value
        self._nullable = nullable
        super().__init__(default=default)

    def validated_value(self, value: Any) -> Optional[int]:
        if value is None and self._nullable:
            return None
        elif not isinstance(value, int) or isinstance(value, bool):
            msg = _("invalid type {!r} for {}, must be of type {!r}")
            raise ExtBindingTypeError(msg.format(type(value), self, int))
        elif self._min_value is not None:
            self._validate_minimum(value, self._min_value)
        return value
