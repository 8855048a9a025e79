# tests/client/test_state.py
import threading

from dating_client.state import Signal


class TestSignal:

    def test_initial_value(self):
        assert Signal(False).get() is False

    def test_subscribers_are_notified_in_order(self):
        signal = Signal(0)
        seen = []
        signal.subscribe(lambda v: seen.append(("first", v)))
        signal.subscribe(lambda v: seen.append(("second", v)))

        signal.set(1)

        assert seen == [("first", 1), ("second", 1)]

    def test_unchanged_value_does_not_notify(self):
        signal = Signal("a")
        seen = []
        signal.subscribe(seen.append)

        signal.set("a")

        assert seen == []

    def test_unsubscribe_stops_notifications(self):
        signal = Signal(0)
        seen = []
        unsubscribe = signal.subscribe(seen.append)

        signal.set(1)
        unsubscribe()
        signal.set(2)

        assert seen == [1]
        unsubscribe()

    def test_update_applies_function(self):
        signal = Signal(1)
        seen = []
        signal.subscribe(seen.append)

        signal.update(lambda v: v + 1)

        assert signal.get() == 2
        assert seen == [2]

    def test_update_notifies_without_holding_the_lock(self):
        """
        Scenario: A subscriber hands work to another thread that touches
        the same signal.
        Expected: The other thread is not blocked by update().
        """
        signal = Signal(0)
        finished = []

        def on_change(value):
            worker = threading.Thread(
                target=lambda: finished.append(signal.subscribe(lambda v: None))
            )
            worker.start()
            worker.join(timeout=2)

        signal.subscribe(on_change)
        signal.update(lambda v: v + 1)

        assert len(finished) == 1
