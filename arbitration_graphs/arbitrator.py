"""Base arbitrator selecting among behavior options, with verification."""

from __future__ import annotations

import enum
import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Hashable, TextIO, TypeVar

from .behavior import Behavior

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

STRIKE_THROUGH_ON = "×××\010\010\010\033[9m"
STRIKE_THROUGH_OFF = "\033[29m\033[8m×××\033[28m"

_NO_COMMAND = object()


class ArbitrationError(Exception):
    """Base class of all arbitration errors."""


class InvalidArgumentsError(ArbitrationError, ValueError):
    """Raised when a function is called with arguments it cannot handle."""


class VerificationError(ArbitrationError):
    """Raised when commands fail verification."""


class NoApplicableOptionPassedVerificationError(VerificationError):
    """Raised when none of an arbitrator's applicable options passed verification."""


class OptionFlags(enum.IntFlag):
    NO_FLAGS = 0b0
    INTERRUPTABLE = 0b1
    FALLBACK = 0b10


@dataclass(frozen=True)
class PlaceboResult:
    """A verification result; passes unless constructed with ok=False."""

    ok: bool = True

    def is_ok(self) -> bool:
        return self.ok


class PlaceboVerifier:
    """A verifier that accepts every command."""

    def analyze(self, time: Any, command: Any) -> PlaceboResult:
        return PlaceboResult()


class ResultCache(Generic[K, V]):
    """Values cached by key, e.g. per time point."""

    def __init__(self) -> None:
        self._values: dict[K, V] = {}

    def cache(self, key: K, value: V) -> None:
        self._values[key] = value

    def cached(self, key: K) -> V | None:
        """Return the value cached for key, or None."""
        return self._values.get(key)

    def reset(self) -> None:
        self._values.clear()


class Option:
    """A behavior held by an arbitrator together with its flags."""

    def __init__(self, behavior: Behavior, flags: OptionFlags | int = OptionFlags.NO_FLAGS) -> None:
        self.behavior = behavior
        self.flags = OptionFlags(flags)
        self.verification_result: ResultCache[Any, Any] = ResultCache()
        self._command: ResultCache[Any, Any] = ResultCache()

    def get_command(self, time: Any) -> Any:
        """Return the behavior's command, computed at most once per time."""
        cached = self._command.cached(time)
        if cached is None:
            cached = (self.behavior.get_command(time),)
            self._command.cache(time, cached)
        return cached[0]

    def has_flag(self, flag: OptionFlags | int) -> bool:
        return bool(self.flags & flag)

    def to_stream(
        self, output: TextIO, time: Any, option_index: int, prefix: str = "", suffix: str = ""
    ) -> TextIO:
        """Write the option's behavior, struck through if it failed verification."""
        result = self.verification_result.cached(time)
        failed = result is not None and not result.is_ok()
        if failed:
            output.write(STRIKE_THROUGH_ON)
        self.behavior.to_stream(output, time, prefix, suffix)
        if failed:
            output.write(STRIKE_THROUGH_OFF)
        return output

    def to_yaml(self, time: Any) -> dict[str, Any]:
        node: dict[str, Any] = {"type": "Option", "behavior": self.behavior.to_yaml(time)}
        flags = [flag.name for flag in (OptionFlags.INTERRUPTABLE, OptionFlags.FALLBACK) if self.has_flag(flag)]
        if flags:
            node["flags"] = flags
        result = self.verification_result.cached(time)
        if result is not None:
            node["verificationResult"] = "passed" if result.is_ok() else "failed"
        return node


class Arbitrator(Behavior):
    """A behavior that selects one of its options following a policy.

    Subclasses define the policy in _sort_options_by_given_policy() and
    register options through _add_option().
    """

    def __init__(self, name: str = "Arbitrator", verifier: Any = None) -> None:
        super().__init__(name)
        self.verifier = verifier if verifier is not None else PlaceboVerifier()
        self._behavior_options: list[Option] = []
        self._active_option: Option | None = None

    @abstractmethod
    def _sort_options_by_given_policy(self, options: list[Option], time: Any) -> list[Option]:
        """Return the applicable options, best first."""

    def _add_option(self, option: Option) -> None:
        self._behavior_options.append(option)

    def _convert_command(self, sub_command: Any) -> Any:
        """Turn an option's command into this arbitrator's command type."""
        return sub_command

    def options(self) -> list[Option]:
        return list(self._behavior_options)

    def get_command(self, time: Any) -> Any:
        command = self._get_and_verify_command_from_active(time)
        if command is not _NO_COMMAND:
            return self._convert_command(command)
        sorted_options = self._sort_options_by_given_policy(self.applicable_options(time), time)
        return self._convert_command(self._get_and_verify_command_from_applicable(sorted_options, time))

    def check_invocation_condition(self, time: Any) -> bool:
        return any(option.behavior.check_invocation_condition(time) for option in self._behavior_options)

    def check_commitment_condition(self, time: Any) -> bool:
        if self._active_option is None:
            return False
        return self.check_invocation_condition(time) or self._active_option.behavior.check_commitment_condition(
            time
        )

    def gain_control(self, time: Any) -> None:
        pass

    def lose_control(self, time: Any) -> None:
        if self._active_option is not None:
            self._active_option.behavior.lose_control(time)
        self._active_option = None

    def is_active(self, option: Option) -> bool:
        return self._active_option is not None and option is self._active_option

    def is_applicable(self, option: Option, time: Any) -> bool:
        active_and_continuable = self.is_active(option) and option.behavior.check_commitment_condition(time)
        return active_and_continuable or option.behavior.check_invocation_condition(time)

    def applicable_options(self, time: Any) -> list[Option]:
        return [option for option in self._behavior_options if self.is_applicable(option, time)]

    def get_option_index(self, option: Option) -> int:
        for index, candidate in enumerate(self._behavior_options):
            if candidate is option:
                return index
        raise InvalidArgumentsError(
            "Invalid call of get_option_index(): Given option not found in list of behavior options!"
        )

    def to_stream(self, output: TextIO, time: Any, prefix: str = "", suffix: str = "") -> TextIO:
        super().to_stream(output, time, prefix, suffix)
        for index, option in enumerate(self._behavior_options):
            marker = " -> " if self.is_active(option) else "    "
            output.write(f"{suffix}\n{prefix}{marker}")
            option.to_stream(output, time, index, "    " + prefix, suffix)
        return output

    def to_yaml(self, time: Any) -> dict[str, Any]:
        node = super().to_yaml(time)
        node["type"] = "Arbitrator"
        node["options"] = [option.to_yaml(time) for option in self._behavior_options]
        if self._active_option is not None:
            node["activeBehavior"] = self.get_option_index(self._active_option)
        return node

    def _get_and_verify_command(self, option: Option, time: Any) -> Any:
        try:
            command = option.get_command(time)
            result = self.verifier.analyze(time, command)
            option.verification_result.cache(time, result)
            # options flagged as fallback do not need to pass verification
            if result.is_ok() or option.has_flag(OptionFlags.FALLBACK):
                return command
            logger.debug("Option %s is applicable, but not safe: %s", option.behavior.name, result)
        except VerificationError:
            option.verification_result.reset()
            logger.debug("Option %s is an arbitrator without safe applicable option", option.behavior.name)
        return _NO_COMMAND

    def _get_and_verify_command_from_active(self, time: Any) -> Any:
        active = self._active_option
        can_be_continued = active is not None and active.behavior.check_commitment_condition(time)

        if active is not None and not can_be_continued:
            active.behavior.lose_control(time)
            self._active_option = None

        active = self._active_option
        interruptable = active is not None and active.has_flag(OptionFlags.INTERRUPTABLE)

        if active is not None and can_be_continued and not interruptable:
            command = self._get_and_verify_command(active, time)
            if command is not _NO_COMMAND:
                return command
            active.behavior.lose_control(time)
            self._active_option = None

        return _NO_COMMAND

    def _get_and_verify_command_from_applicable(self, options: list[Option], time: Any) -> Any:
        for best_option in options:
            if not self.is_active(best_option):
                # both may hold control until best_option is known to pass verification
                best_option.behavior.gain_control(time)

            try:
                command = self._get_and_verify_command(best_option, time)
            except Exception as error:  # noqa: BLE001 - a broken behavior must not stop arbitration
                logger.debug("%s raised during verification: %s", best_option.behavior.name, error)
                best_option.verification_result.cache(time, PlaceboResult(False))
                best_option.behavior.lose_control(time)
                continue

            if command is not _NO_COMMAND:
                if self._active_option is not None and best_option is not self._active_option:
                    self._active_option.behavior.lose_control(time)
                self._active_option = best_option
                return command
            best_option.behavior.lose_control(time)

        raise NoApplicableOptionPassedVerificationError(
            f"None of the {len(options)} applicable options passed the verification step!"
        )