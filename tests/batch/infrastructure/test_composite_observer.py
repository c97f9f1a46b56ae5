"""Tests for CompositeBatchObserver."""

from rpc_batch.batch.infrastructure.composite_observer import CompositeBatchObserver
from tests.batch.fake_observer import FakeBatchObserver


def _make_composite(*observers: FakeBatchObserver) -> CompositeBatchObserver:
    return CompositeBatchObserver(observers=list(observers))


class TestCompositeBatchObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_batch_started_forwarded_to_all(self) -> None:
        obs_a = FakeBatchObserver()
        obs_b = FakeBatchObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.batch_started(
            batch_id="b-1", total_items=7, total_chunks=3, concurrency=3
        )

        assert obs_a.started[0].total_items == 7
        assert obs_b.started[0].total_chunks == 3

    def test_chunk_events_preserve_fields(self) -> None:
        obs = FakeBatchObserver()
        composite = _make_composite(obs)

        composite.chunk_started(batch_id="b-1", chunk_index=2, offset=6, size=1)
        composite.chunk_completed(batch_id="b-1", chunk_index=2, completed_items=1)

        assert obs.chunks_started[0].offset == 6
        assert obs.chunks_started[0].size == 1
        assert obs.chunks_completed[0].completed_items == 1

    def test_batch_completed_forwarded_to_all(self) -> None:
        obs_a = FakeBatchObserver()
        obs_b = FakeBatchObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.batch_completed(batch_id="b-1", total_items=7, elapsed_seconds=1.5)

        assert obs_a.completed[0].elapsed_seconds == 1.5
        assert obs_b.completed[0].elapsed_seconds == 1.5

    def test_batch_failed_forwarded_to_all(self) -> None:
        obs_a = FakeBatchObserver()
        obs_b = FakeBatchObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.batch_failed(batch_id="b-1", chunk_index=0, reason="boom")

        assert obs_a.failed[0].reason == "boom"
        assert obs_b.failed[0].reason == "boom"

    def test_no_observers_is_a_no_op(self) -> None:
        composite = _make_composite()

        composite.batch_failed(batch_id="b-1", chunk_index=0, reason="boom")
