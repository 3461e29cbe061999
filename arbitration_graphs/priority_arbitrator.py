"""Arbitrator that selects the first applicable option in the order they were added."""

from __future__ import annotations

from typing import Any, TextIO

from .arbitrator import Arbitrator, Option, OptionFlags
from .behavior import Behavior


class PriorityOption(Option):
    """An option of a PriorityArbitrator, printed with its rank."""

    def to_stream(
        self, output: TextIO, time: Any, option_index: int, prefix: str = "", suffix: str = ""
    ) -> TextIO:
        output.write(f"{option_index + 1}. ")
        return super().to_stream(output, time, option_index, prefix, suffix)


class PriorityArbitrator(Arbitrator):
    """Selects among its options by priority: earlier options win."""

    def __init__(self, name: str = "PriorityArbitrator", verifier: Any = None) -> None:
        super().__init__(name, verifier)

    def add_option(self, behavior: Behavior, flags: OptionFlags | int = OptionFlags.NO_FLAGS) -> None:
        """Append an option with lower priority than all existing ones."""
        self._add_option(PriorityOption(behavior, flags))

    def to_yaml(self, time: Any) -> dict[str, Any]:
        node = super().to_yaml(time)
        node["type"] = "PriorityArbitrator"
        return node

    def _sort_options_by_given_policy(self, options: list[Option], time: Any) -> list[Option]:
        # options keep the order of insertion, which is their priority
        return list(options)