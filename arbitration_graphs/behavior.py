"""The abstract behavior that every node of an arbitration graph derives from."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Any, Generic, TextIO, TypeVar

CommandT = TypeVar("CommandT")

INVOCATION_TRUE = "\033[32mINVOCATION\033[39m "
INVOCATION_FALSE = "\033[31mInvocation\033[39m "
COMMITMENT_TRUE = "\033[32mCOMMITMENT\033[39m "
COMMITMENT_FALSE = "\033[31mCommitment\033[39m "


class Behavior(ABC, Generic[CommandT]):
    """Most abstract representation of a behavior.

    A behavior knows whether it is applicable in the current situation
    (invocation condition) and whether it can be continued (commitment
    condition). Arbitrators combine behaviors into hierarchies.
    """

    #: Condition values reported when a subclass does not override the checks.
    default_invocation_condition: bool = False
    default_commitment_condition: bool = False

    def __init__(self, name: str = "Behavior") -> None:
        self.name = name
        self.controlled_since: Any = None

    @abstractmethod
    def get_command(self, time: Any) -> CommandT:
        """Return a command realizing this behavior at the given time."""

    def check_invocation_condition(self, time: Any) -> bool:
        """True if the behavior can be activated now."""
        return bool(self.default_invocation_condition)

    def check_commitment_condition(self, time: Any) -> bool:
        """True if the behavior can be continued now."""
        return bool(self.default_commitment_condition)

    def gain_control(self, time: Any) -> None:
        """Called once before the behavior becomes active; records the time."""
        self.controlled_since = time

    def lose_control(self, time: Any) -> None:
        """Called once before the behavior becomes inactive; clears the record."""
        self.controlled_since = None

    def to_str(self, time: Any, prefix: str = "", suffix: str = "") -> str:
        """Return the textual representation written by to_stream()."""
        return self.to_stream(io.StringIO(), time, prefix, suffix).getvalue()

    def to_stream(self, output: TextIO, time: Any, prefix: str = "", suffix: str = "") -> TextIO:
        """Write the behavior's state to output and return output.

        True conditions are shown upper-case green, false ones lower-case red.
        Prefix and suffix are only written around newlines, of which a plain
        behavior writes none.
        """
        output.write(INVOCATION_TRUE if self.check_invocation_condition(time) else INVOCATION_FALSE)
        output.write(COMMITMENT_TRUE if self.check_commitment_condition(time) else COMMITMENT_FALSE)
        output.write(self.name)
        return output

    def to_yaml(self, time: Any) -> dict[str, Any]:
        """Return a YAML-ready mapping describing the behavior's state."""
        return {
            "type": "Behavior",
            "name": self.name,
            "invocationCondition": self.check_invocation_condition(time),
            "commitmentCondition": self.check_commitment_condition(time),
        }