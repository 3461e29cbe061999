import pytest

from arbitration_graphs.behavior import (
    COMMITMENT_FALSE,
    COMMITMENT_TRUE,
    INVOCATION_FALSE,
    INVOCATION_TRUE,
    Behavior,
)

TIME = 0.0


class DummyBehavior(Behavior):
    def __init__(self, invocation, commitment, name="DummyBehavior"):
        super().__init__(name)
        self.invocation_condition = invocation
        self.commitment_condition = commitment
        self.gain_control_counter = 0
        self.lose_control_counter = 0

    def get_command(self, time):
        return self.name

    def check_invocation_condition(self, time):
        return self.invocation_condition

    def check_commitment_condition(self, time):
        return self.commitment_condition

    def gain_control(self, time):
        self.gain_control_counter += 1

    def lose_control(self, time):
        self.lose_control_counter += 1


class MinimalBehavior(Behavior):
    def get_command(self, time):
        return 42


def test_basic_interface():
    behavior = DummyBehavior(True, True)
    assert behavior.get_command(TIME) == "DummyBehavior"

    yaml = Behavior.to_yaml(behavior, TIME)
    assert yaml["invocationCondition"] is True
    assert yaml["commitmentCondition"] is True

    behavior.gain_control(TIME)
    behavior.lose_control(TIME)
    assert behavior.gain_control_counter == 1
    assert behavior.lose_control_counter == 1


def test_printout():
    behavior = DummyBehavior(True, True)
    assert Behavior.to_str(behavior, TIME) == INVOCATION_TRUE + COMMITMENT_TRUE + "DummyBehavior"


def test_printout_false_conditions():
    behavior = DummyBehavior(False, True, "X")
    assert Behavior.to_str(behavior, TIME) == INVOCATION_FALSE + COMMITMENT_TRUE + "X"


def test_prefix_and_suffix_only_around_newlines():
    behavior = DummyBehavior(True, True)
    assert (
        Behavior.to_str(behavior, TIME, "pre", "suf")
        == INVOCATION_TRUE + COMMITMENT_TRUE + "DummyBehavior"
    )


def test_to_yaml():
    behavior = DummyBehavior(True, True)
    yaml = Behavior.to_yaml(behavior, TIME)
    assert yaml["type"] == "Behavior"
    assert yaml["name"] == "DummyBehavior"
    assert yaml["invocationCondition"] is True
    assert yaml["commitmentCondition"] is True


def test_defaults():
    behavior = MinimalBehavior()
    assert behavior.name == "Behavior"
    assert Behavior.check_invocation_condition(behavior, TIME) is False
    assert Behavior.check_commitment_condition(behavior, TIME) is False
    assert behavior.get_command(TIME) == 42
    assert Behavior.to_str(behavior, TIME) == INVOCATION_FALSE + COMMITMENT_FALSE + "Behavior"


def test_base_conditions_default_to_false_regardless_of_subclass():
    behavior = DummyBehavior(True, True)
    assert Behavior.check_invocation_condition(behavior, TIME) is False
    assert Behavior.check_commitment_condition(behavior, TIME) is False


def test_abstract_behavior_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Behavior()