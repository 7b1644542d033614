"""Test replaying keypad sessions."""
from keypad_calculator.calculator.store import CalculatorStore
from keypad_calculator.common.config import CalculatorConfig
from keypad_calculator.session.replay import SessionLine, replay_session


def test_replay_single_line() -> None:
    """A line of keys produces the display after the last key."""
    results = replay_session(["5 + 3 ="], CalculatorStore())
    assert results == [SessionLine(keys="5 + 3 =", upper="8", lower="")]


def test_replay_state_carries_over() -> None:
    """Each line starts from the state left by the previous one."""
    results = replay_session(["1 2", "* 3", "=", "AC"], CalculatorStore())
    assert [(r.upper, r.lower) for r in results] == [
        ("12", ""),
        ("12*", "3"),
        ("36", ""),
        ("", ""),
    ]


def test_replay_normalises_whitespace() -> None:
    """Key labels may be separated by any whitespace."""
    results = replay_session(["7   /\t0 ="], CalculatorStore())
    assert results[0].keys == "7 / 0 ="
    assert results[0].upper == "inf"


def test_replay_with_operator_bug() -> None:
    """The compatibility flag makes every operator key add."""
    store = CalculatorStore(config=CalculatorConfig(reproduce_operator_bug=True))
    results = replay_session(["6 * 2 ="], store)
    assert results[0].upper == "8"


def test_replay_unknown_key_skips_line() -> None:
    """A line with an unknown label is recorded as an error and replay goes on."""
    store = CalculatorStore()

    results = replay_session(["4", "2 sqrt", "+ 1 ="], store)

    assert results[1].keys == "2 sqrt"
    assert "Unknown key: 'sqrt'" in results[1].error
    assert results[1].to_text().startswith("2 sqrt -> ERROR: ")
    # The "2" of the bad line was never pressed
    assert (results[2].upper, results[2].lower) == ("5", "")
    assert store.state.first_number == "5"


def test_session_line_to_text() -> None:
    """Results are formatted as 'keys -> upper | lower'."""
    line = SessionLine(keys="1 +", upper="1+", lower="")
    assert line.to_text() == "1 + -> 1+ | "
