"""Maps raw provider payloads onto the stable transcript shape."""

import math
from typing import Any

from .models import TranscriptionResult, TranscriptionSegment


def _as_float(value: Any, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


class TranscriptNormalizer:
    """Builds ``TranscriptionResult`` objects from completed provider payloads."""

    def normalize(
        self, raw_result: dict[str, Any], job_id: str = ""
    ) -> TranscriptionResult:
        """
        Normalizes a completed provider payload.

        Never raises on malformed input: missing or invalid fields fall back
        to empty or zero values. Utterance timestamps are milliseconds;
        ``audio_duration`` is already in seconds.

        Args:
            raw_result: The provider's completed-job payload.
            job_id: Fallback id when the payload carries none.

        Returns:
            The normalized transcript.
        """
        utterances = raw_result.get("utterances")
        if not isinstance(utterances, (list, tuple)):
            utterances = ()
        segments = tuple(
            self._segment(utterance)
            for utterance in utterances
            if isinstance(utterance, dict)
        )

        language = raw_result.get("language_code")
        audio_duration = _as_float(raw_result.get("audio_duration"))

        return TranscriptionResult(
            id=str(raw_result.get("id") or job_id),
            language=str(language).lower() if language else "unknown",
            segments=segments,
            full_text=str(raw_result.get("text") or ""),
            processing_time_seconds=max(audio_duration, 0.0),
        )

    def _segment(self, utterance: dict[str, Any]) -> TranscriptionSegment:
        """Converts one provider utterance, clamping values into valid ranges."""
        speaker = utterance.get("speaker")
        start = max(_as_float(utterance.get("start")) / 1000.0, 0.0)
        end = max(_as_float(utterance.get("end")) / 1000.0, start)
        confidence = min(max(_as_float(utterance.get("confidence")), 0.0), 1.0)

        return TranscriptionSegment(
            speaker=f"Speaker {speaker if speaker is not None else 'unknown'}",
            text=str(utterance.get("text") or ""),
            start_seconds=start,
            end_seconds=end,
            confidence=confidence,
        )
