"""Arbitrator that selects among applicable options at random, by weight."""

from __future__ import annotations

import random
from typing import Any, TextIO

from .arbitrator import Arbitrator, InvalidArgumentsError, Option, OptionFlags
from .behavior import Behavior


class RandomOption(Option):
    """An option chosen with probability weight / sum of all weights."""

    def __init__(self, behavior: Behavior, flags: OptionFlags | int, weight: float = 1.0) -> None:
        super().__init__(behavior, flags)
        if weight < 0:
            raise InvalidArgumentsError(f"Option weight must not be negative, got {weight}")
        self.weight = float(weight)

    def to_stream(
        self, output: TextIO, time: Any, option_index: int, prefix: str = "", suffix: str = ""
    ) -> TextIO:
        output.write(f"- (weight: {self.weight:.3f}) ")
        return super().to_stream(output, time, option_index, prefix, suffix)


class RandomArbitrator(Arbitrator):
    """Orders applicable options by weighted sampling without replacement."""

    def __init__(
        self,
        name: str = "RandomArbitrator",
        verifier: Any = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, verifier)
        self._rng = rng if rng is not None else random.Random()

    def add_option(
        self,
        behavior: Behavior,
        flags: OptionFlags | int = OptionFlags.NO_FLAGS,
        weight: float = 1.0,
    ) -> None:
        self._add_option(RandomOption(behavior, flags, weight))

    def to_yaml(self, time: Any) -> dict[str, Any]:
        node = super().to_yaml(time)
        node["type"] = "RandomArbitrator"
        return node

    def _sort_options_by_given_policy(self, options: list[Option], time: Any) -> list[Option]:
        remaining = list(options)
        shuffled: list[Option] = []
        while remaining:
            index = self._sample_index([option.weight for option in remaining])
            shuffled.append(remaining.pop(index))
        return shuffled

    def _sample_index(self, weights: list[float]) -> int:
        """Draw an index with probability proportional to its weight.

        If all weights are zero, the first index is taken.
        """
        total = sum(weights)
        if total <= 0:
            return 0
        threshold = self._rng.random() * total
        cumulative = 0.0
        for index, weight in enumerate(weights):
            cumulative += weight
            if threshold < cumulative:
                return index
        return max(index for index, weight in enumerate(weights) if weight > 0)