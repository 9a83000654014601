"""Test listener registry."""
from unittest.mock import MagicMock, call
from currency_input.listeners import ListenerRegistry, ValueChangeListener


class TestListenerRegistry:
    def test_notifies_in_registration_order(self):
        registry = ListenerRegistry()
        parent = MagicMock()
        first = MagicMock(spec=ValueChangeListener)
        second = MagicMock(spec=ValueChangeListener)
        parent.attach_mock(first, "first")
        parent.attach_mock(second, "second")
        registry.add(first)
        registry.add(second)

        registry.notify_changed(1.5)
        registry.notify_cleared()

        assert parent.mock_calls == [
            call.first.on_changed(1.5),
            call.second.on_changed(1.5),
            call.first.on_cleared(),
            call.second.on_cleared(),
        ]

    def test_remove_all(self):
        registry = ListenerRegistry()
        listener = MagicMock(spec=ValueChangeListener)
        registry.add(listener)
        registry.remove_all()
        registry.notify_changed(1.0)
        assert len(registry) == 0
        listener.on_changed.assert_not_called()

    def test_same_listener_twice_notified_twice(self):
        registry = ListenerRegistry()
        listener = MagicMock(spec=ValueChangeListener)
        registry.add(listener)
        registry.add(listener)
        registry.notify_cleared()
        assert listener.on_cleared.call_count == 2
        assert list(registry) == [listener, listener]
