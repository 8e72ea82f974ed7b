"""Tests for the view state machine."""

import pytest
from pydantic import ValidationError

from conftest import make_conditions
from weathersphere.models.view_state import ViewState, ViewStatus


class TestViewStatus:
    """Tests for ViewStatus enum."""

    def test_string_enum(self):
        """Test that ViewStatus compares equal to its string value."""
        assert ViewStatus.IDLE == "idle"
        assert ViewStatus.FAILED.value == "failed"


class TestTransitions:
    """Tests for ViewState transitions."""

    def test_initial_state_is_idle(self):
        """Test a fresh state has nothing to show."""
        state = ViewState()
        assert state.status == ViewStatus.IDLE
        assert state.conditions is None
        assert state.error is None
        assert state.is_loading is False

    def test_begin_search_from_idle(self):
        """Test idle moves to loading."""
        state = ViewState().begin_search()
        assert state.status == ViewStatus.LOADING
        assert state.is_loading is True

    def test_begin_search_keeps_previous_result(self, conditions):
        """Test the last result stays visible while loading."""
        state = ViewState().succeed(conditions).begin_search()
        assert state.status == ViewStatus.LOADING
        assert state.conditions is conditions

    def test_begin_search_clears_error(self):
        """Test loading clears a previous error."""
        state = ViewState().fail("City not found").begin_search()
        assert state.error is None

    def test_succeed_replaces_result(self, conditions):
        """Test a new result wholly replaces the old one."""
        other = make_conditions(location="Paris", country="FR")
        state = ViewState().succeed(conditions).begin_search().succeed(other)
        assert state.status == ViewStatus.SUCCESS
        assert state.conditions is other
        assert state.error is None

    def test_fail_clears_result(self, conditions):
        """Test failure drops a previously displayed result."""
        state = ViewState().succeed(conditions).begin_search().fail("City not found")
        assert state.status == ViewStatus.FAILED
        assert state.conditions is None
        assert state.error == "City not found"

    def test_transitions_do_not_mutate(self, conditions):
        """Test transitions return new states."""
        idle = ViewState()
        idle.begin_search()
        assert idle.status == ViewStatus.IDLE

    def test_state_is_frozen(self):
        """Test states cannot be modified in place."""
        with pytest.raises(ValidationError):
            ViewState().status = ViewStatus.LOADING


class TestInvalidCombinations:
    """Tests for rejected status/field combinations."""

    def test_idle_with_error(self):
        with pytest.raises(ValidationError):
            ViewState(status=ViewStatus.IDLE, error="boom")

    def test_idle_with_conditions(self, conditions):
        with pytest.raises(ValidationError):
            ViewState(status=ViewStatus.IDLE, conditions=conditions)

    def test_loading_with_error(self):
        with pytest.raises(ValidationError):
            ViewState(status=ViewStatus.LOADING, error="boom")

    def test_success_without_conditions(self):
        with pytest.raises(ValidationError):
            ViewState(status=ViewStatus.SUCCESS)

    def test_failed_without_error(self):
        with pytest.raises(ValidationError):
            ViewState(status=ViewStatus.FAILED)

    def test_failed_with_conditions(self, conditions):
        with pytest.raises(ValidationError):
            ViewState(status=ViewStatus.FAILED, error="boom", conditions=conditions)
