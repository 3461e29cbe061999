"""Arbitrator that selects the applicable option with the lowest estimated cost."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TextIO

from .arbitrator import Arbitrator, Option, OptionFlags
from .behavior import Behavior


class CostEstimator(ABC):
    """Estimates the cost of executing a command."""

    @abstractmethod
    def estimate_cost(self, command: Any, is_active: bool) -> float:
        """Return the cost of command; is_active tells whether its option is active."""


class CostOption(Option):
    """An option of a CostArbitrator together with its cost estimator."""

    def __init__(
        self,
        behavior: Behavior,
        flags: OptionFlags | int,
        cost_estimator: CostEstimator,
    ) -> None:
        super().__init__(behavior, flags)
        self.cost_estimator = cost_estimator
        self.last_estimated_cost: float | None = None

    def to_stream(
        self, output: TextIO, time: Any, option_index: int, prefix: str = "", suffix: str = ""
    ) -> TextIO:
        if self.last_estimated_cost is not None:
            output.write(f"- (cost: {self.last_estimated_cost:.3f}) ")
        else:
            output.write("- (cost:  n.a.) ")
        return super().to_stream(output, time, option_index, prefix, suffix)

    def to_yaml(self, time: Any) -> dict[str, Any]:
        node = super().to_yaml(time)
        if self.last_estimated_cost is not None:
            node["cost"] = self.last_estimated_cost
        return node


class CostArbitrator(Arbitrator):
    """Selects the applicable option whose command has the lowest estimated cost."""

    def __init__(self, name: str = "CostArbitrator", verifier: Any = None) -> None:
        super().__init__(name, verifier)

    def add_option(
        self,
        behavior: Behavior,
        flags: OptionFlags | int,
        cost_estimator: CostEstimator,
    ) -> None:
        self._add_option(CostOption(behavior, flags, cost_estimator))

    def to_yaml(self, time: Any) -> dict[str, Any]:
        node = super().to_yaml(time)
        node["type"] = "CostArbitrator"
        return node

    def _sort_options_by_given_policy(self, options: list[Option], time: Any) -> list[Option]:
        for option in self._behavior_options:
            option.last_estimated_cost = None

        costed: list[tuple[float, Option]] = []
        for option in options:
            is_active = self.is_active(option)
            if is_active:
                cost = option.cost_estimator.estimate_cost(option.get_command(time), is_active)
            else:
                option.behavior.gain_control(time)
                cost = option.cost_estimator.estimate_cost(option.get_command(time), is_active)
                option.behavior.lose_control(time)
            option.last_estimated_cost = cost
            costed.append((cost, option))

        # stable: options of equal cost keep their insertion order
        return [option for _, option in sorted(costed, key=lambda pair: pair[0])]