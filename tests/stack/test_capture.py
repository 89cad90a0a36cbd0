# tests/stack/test_capture.py
"""
Stack Capture Tests - which frames capture_stack() records
"""

import inspect
from dataclasses import FrozenInstanceError

import pytest

from failchain.config import FailChainConfig, StackConfig, set_config
from failchain.core.stack import capture_stack, StackTrace


def _capture_through_helper():
    return capture_stack(1)


def _nested(depth):
    if depth == 0:
        return capture_stack()
    return _nested(depth - 1)


def test_capture_starts_at_caller():
    """
    Test: skip=0 records the caller of capture_stack() as the innermost frame
    """
    line = inspect.currentframe().f_lineno + 1
    stack = capture_stack()

    assert len(stack) > 0
    assert stack[0].name == "test_capture_starts_at_caller"
    assert stack[0].file == __file__
    assert stack[0].line == line


def test_skip_omits_wrapper_frames():
    """
    Test: skip=1 drops the helper frame, so the test function is innermost
    """
    stack = _capture_through_helper()

    assert stack[0].name == "test_skip_omits_wrapper_frames"
    assert all(site.name != "_capture_through_helper" for site in stack)


def test_stack_is_ordered_innermost_first():
    stack = _nested(2)

    names = [site.name for site in stack[:4]]
    assert names == ["_nested", "_nested", "_nested", "test_stack_is_ordered_innermost_first"]
    assert stack.innermost is stack[0]


def test_negative_skip_rejected():
    with pytest.raises(ValueError):
        capture_stack(-1)


def test_skip_beyond_stack_returns_empty():
    """
    Test: asking to skip more frames than exist yields an empty trace, not an error
    """
    stack = capture_stack(100_000)

    assert isinstance(stack, StackTrace)
    assert len(stack) == 0


def test_max_depth_argument_limits_capture():
    stack = capture_stack(max_depth=3)

    assert len(stack) == 3
    assert stack[0].name == "test_max_depth_argument_limits_capture"


def test_configured_max_depth_limits_capture():
    set_config(FailChainConfig(stack=StackConfig(max_depth=2)))

    stack = _nested(5)

    assert len(stack) == 2
    assert [site.name for site in stack] == ["_nested", "_nested"]


def test_capture_is_always_on():
    """
    Test: there is no switch that turns capture off; a minimal depth still records the capture site
    """
    set_config(FailChainConfig(stack=StackConfig(max_depth=1)))

    stack = capture_stack()

    assert len(stack) == 1
    assert stack[0].name == "test_capture_is_always_on"
    assert not hasattr(StackConfig(), "enabled")


def test_captured_stack_is_immutable():
    stack = capture_stack()

    with pytest.raises(FrozenInstanceError):
        stack.frames = ()
    with pytest.raises(FrozenInstanceError):
        stack[0].lineno = 1
    assert isinstance(stack.frames, tuple)


def test_repeated_capture_at_same_site_is_equal():
    stacks = [capture_stack() for _ in range(2)]

    assert stacks[0] == stacks[1]
    assert stacks[0] is not stacks[1]
