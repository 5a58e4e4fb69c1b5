"""
Tests for Dedication — Purpose-dedicated windows
"""

from purpose.core.dedication import DEDICATED_PARAMETER
from purpose.core.host import Direction


class TestToggle:
    """toggle_dedicated flips the window parameter."""

    def test_starts_undedicated(self, purpose_factory):
        frame, window = purpose_factory.single()
        assert not purpose_factory.dedication.is_dedicated(window)

    def test_toggle_returns_new_value(self, purpose_factory):
        frame, window = purpose_factory.single()
        assert purpose_factory.dedication.toggle_dedicated(window) is True
        assert purpose_factory.dedication.is_dedicated(window)
        assert window.parameters[DEDICATED_PARAMETER] is True

    def test_toggle_twice_restores(self, purpose_factory):
        frame, window = purpose_factory.single()
        purpose_factory.dedication.toggle_dedicated(window)
        assert purpose_factory.dedication.toggle_dedicated(window) is False
        assert not purpose_factory.dedication.is_dedicated(window)

    def test_defaults_to_selected_window(self, purpose_factory):
        frame, left, right = purpose_factory.side_by_side()
        purpose_factory.host.select_window(right)
        purpose_factory.dedication.toggle_dedicated()
        assert purpose_factory.dedication.is_dedicated(right)
        assert not purpose_factory.dedication.is_dedicated(left)

    def test_indicator_refreshed(self, purpose_factory):
        frame, window = purpose_factory.single()
        purpose_factory.dedication.toggle_dedicated(window)
        assert purpose_factory.host.indicator_updates == [window]

    def test_set_dedicated(self, purpose_factory):
        frame, window = purpose_factory.single()
        purpose_factory.dedication.set_dedicated(window, True)
        assert purpose_factory.dedication.is_dedicated(window)
        purpose_factory.dedication.set_dedicated(window, False)
        assert not purpose_factory.dedication.is_dedicated(window)


class TestBufferDedication:
    """The host's own buffer dedication is a separate flag."""

    def test_flags_independent(self, purpose_factory):
        frame, window = purpose_factory.single()
        purpose_factory.dedication.toggle_buffer_dedicated(window)
        assert window.dedicated is True
        assert not purpose_factory.dedication.is_dedicated(window)

        purpose_factory.dedication.toggle_dedicated(window)
        purpose_factory.dedication.toggle_buffer_dedicated(window)
        assert window.dedicated is False
        assert purpose_factory.dedication.is_dedicated(window)

    def test_buffer_toggle_refreshes_indicator(self, purpose_factory):
        frame, window = purpose_factory.single()
        purpose_factory.dedication.toggle_buffer_dedicated(window)
        assert purpose_factory.host.indicator_updates == [window]


class TestLifetime:
    """The flag lives and dies with its window."""

    def test_deleted_window_loses_flag(self, purpose_factory):
        frame, left, right = purpose_factory.side_by_side()
        purpose_factory.dedication.toggle_dedicated(right)
        purpose_factory.host.delete_window(right)
        assert DEDICATED_PARAMETER not in right.parameters

    def test_new_window_starts_undedicated(self, purpose_factory):
        frame, window = purpose_factory.single()
        purpose_factory.dedication.toggle_dedicated(window)
        new_window = purpose_factory.host.split_window(window, Direction.BELOW)
        assert purpose_factory.dedication.is_dedicated(window)
        assert not purpose_factory.dedication.is_dedicated(new_window)
