"""Tests for stacklog.trim — push/pop trim level stacks."""

import pytest

from stacklog.trim import TrimLevelStack


class TestTrimLevelStack:

    def test_base_value(self):
        stack = TrimLevelStack(2)
        assert stack.current() == 2
        assert stack.depth == 1

    def test_push_then_pop_restores(self):
        stack = TrimLevelStack()
        stack.push(3)
        assert stack.current() == 3
        stack.pop()
        assert stack.current() == 0

    def test_pop_at_base_is_noop(self):
        """The base element can never be removed."""
        stack = TrimLevelStack(1)
        stack.pop()
        stack.pop()
        assert stack.depth == 1
        assert stack.current() == 1

    def test_depth_never_below_one(self):
        stack = TrimLevelStack()
        for op in [5, None, None, 2, 7, None, None, None, None]:
            if op is None:
                stack.pop()
            else:
                stack.push(op)
            assert stack.depth >= 1
        assert stack.current() == 0

    def test_negative_level_rejected(self):
        stack = TrimLevelStack()
        with pytest.raises(ValueError):
            stack.push(-1)
        assert stack.depth == 1


class TestScopedTrim:

    def test_scoped_restores_on_exit(self):
        stack = TrimLevelStack()
        with stack.scoped(4) as level:
            assert level == 4
            assert stack.current() == 4
        assert stack.current() == 0
        assert stack.depth == 1

    def test_scoped_restores_on_exception(self):
        stack = TrimLevelStack()
        with pytest.raises(RuntimeError):
            with stack.scoped(4):
                raise RuntimeError("boom")
        assert stack.depth == 1

    def test_nested_scopes(self):
        stack = TrimLevelStack()
        with stack.scoped(1):
            with stack.scoped(2):
                assert stack.current() == 2
            assert stack.current() == 1
        assert stack.current() == 0
