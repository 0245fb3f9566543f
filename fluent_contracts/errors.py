"""
errors.py - exception kinds and the helpers that raise them.

Public API
----------
ContractError
    Base class for every violation raised by a contract check.

ArgumentNullError, ArgumentOutOfRangeError, ArgumentConditionError
    The three built-in violation kinds.

raise_argument_null / raise_argument_out_of_range /
raise_condition_not_satisfied / raise_user_defined
    Terminal helpers used by :pymod:`fluent_contracts.validator`.  They never
    return.
"""

from __future__ import annotations

from typing import Callable, NoReturn, Optional, Union

__all__ = [
    "ContractError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "ArgumentConditionError",
    "ErrorFactory",
    "raise_argument_null",
    "raise_argument_out_of_range",
    "raise_condition_not_satisfied",
    "raise_user_defined",
]

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class ContractError(ValueError):
    """Raised when an argument violates a contract.

    ``str(exc)`` reads ``"<message> (Parameter '<argument_name>')"``.
    """

    default_message = "Argument is invalid."

    def __init__(self, argument_name: str, message: Optional[str] = None):
        self.argument_name = argument_name
        self.message = message if message is not None else self._default(argument_name)
        super().__init__(f"{self.message} (Parameter '{argument_name}')")

    def __reduce__(self):
        return (type(self), (self.argument_name, self.message))

    def _default(self, argument_name: str) -> str:
        return self.default_message


class ArgumentNullError(ContractError):
    """The argument is ``None`` where a value is required."""

    default_message = "Value cannot be null."


class ArgumentOutOfRangeError(ContractError):
    """The argument's value falls outside the accepted set, range or condition."""

    default_message = "Specified argument was out of the range of valid values."


class ArgumentConditionError(ContractError):
    """A caller-supplied condition evaluated false."""

    def _default(self, argument_name: str) -> str:
        return f"Condition for argument {argument_name} was not satisfied"


# An exception class, or any callable building one from an optional message.
ErrorFactory = Union[type, Callable[..., BaseException]]

# --------------------------------------------------------------------------- #
# Raise helpers                                                               #
# --------------------------------------------------------------------------- #

def raise_argument_null(argument_name: str, message: Optional[str] = None) -> NoReturn:
    raise ArgumentNullError(argument_name, message)


def raise_argument_out_of_range(argument_name: str, message: Optional[str] = None) -> NoReturn:
    raise ArgumentOutOfRangeError(argument_name, message)


def raise_condition_not_satisfied(argument_name: str, message: Optional[str] = None) -> NoReturn:
    raise ArgumentConditionError(argument_name, message)


def raise_user_defined(error: ErrorFactory, message: Optional[str] = None) -> NoReturn:
    """Build an exception from *error* and raise it.

    *error* is called with *message* when one is given, and with no arguments
    otherwise so the exception keeps its own default text.
    """
    exc = error(message) if message is not None else error()
    raise exc
