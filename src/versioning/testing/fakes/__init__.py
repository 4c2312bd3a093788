"""Testing fakes – in-memory doubles."""
from versioning.testing.fakes.observer import RecordingObserver

__all__ = ["RecordingObserver"]
