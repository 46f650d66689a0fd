"""Testing fakes – in-memory doubles for the export ports."""
from mp_exports.testing.fakes.clock import FakeClock, FakeSleeper
from mp_exports.testing.fakes.producer import ScriptedRemoteProducer
from mp_exports.testing.fakes.sinks import (
    InMemoryArtifactPersister,
    RecordingNotificationSink,
    RecordingTelemetrySink,
)
from mp_exports.kernel.time import FrozenClock

__all__ = [
    "FakeClock",
    "FakeSleeper",
    "FrozenClock",
    "InMemoryArtifactPersister",
    "RecordingNotificationSink",
    "RecordingTelemetrySink",
    "ScriptedRemoteProducer",
]
