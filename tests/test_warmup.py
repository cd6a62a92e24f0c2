"""Tests for warm-up phase tracking."""
import threading

from paloma_client.warmup import WarmupPhase


class TestWarmupPhase:
    def test_inactive_by_default(self):
        assert WarmupPhase().is_active() is False

    def test_initially_active(self):
        assert WarmupPhase(active=True).is_active() is True

    def test_context_manager(self):
        phase = WarmupPhase()
        with phase:
            assert phase.is_active() is True
        assert phase.is_active() is False

    def test_nested(self):
        phase = WarmupPhase()
        with phase:
            with phase:
                assert phase.is_active() is True
            assert phase.is_active() is True
        assert phase.is_active() is False

    def test_restored_on_error(self):
        phase = WarmupPhase()
        try:
            with phase:
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert phase.is_active() is False

    def test_scoped_to_thread(self):
        phase = WarmupPhase()
        seen = []
        with phase:
            worker = threading.Thread(target=lambda: seen.append(phase.is_active()))
            worker.start()
            worker.join()
            assert phase.is_active() is True
        assert seen == [False]

    def test_initially_active_for_all_threads(self):
        phase = WarmupPhase(active=True)
        seen = []
        worker = threading.Thread(target=lambda: seen.append(phase.is_active()))
        worker.start()
        worker.join()
        assert seen == [True]
