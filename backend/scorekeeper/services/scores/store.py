import logging
import threading
from dataclasses import replace
from typing import List, Optional

from scorekeeper.models import AggregateRecord, ScoreSubmission

INITIAL_ID = 1


class ScoreStore:
    """In-memory holder of the single running aggregate.

    The store is EMPTY until the first submit and POPULATED afterwards;
    reset() always returns it to EMPTY. All operations take the same
    lock so concurrent requests can't lose updates to play_count or
    average_score. Records handed out are copies.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._record: Optional[AggregateRecord] = None
        self._next_id = INITIAL_ID

    def fetch(self) -> List[AggregateRecord]:
        with self._lock:
            if self._record is None:
                return []
            return [replace(self._record)]

    def submit(self, submission: ScoreSubmission) -> AggregateRecord:
        with self._lock:
            record = self._record
            if record is None:
                record = AggregateRecord(
                    id=self._next_id,
                    best_score=submission.score,
                    average_score=float(submission.score),
                    play_count=1,
                    latest_score=submission.score,
                    moves=submission.moves,
                    time=submission.time,
                    created_at=submission.created_at,
                )
                self._record = record
                self._next_id += 1
            else:
                # Total is rebuilt from the stored mean on every fold.
                # The record is only assigned once every value is computed.
                total = record.average_score * record.play_count
                play_count = record.play_count + 1
                total += submission.score
                average_score = total / play_count
                best_score = max(record.best_score, submission.score)

                record.play_count = play_count
                record.average_score = average_score
                record.best_score = best_score
                record.latest_score = submission.score
                record.moves = submission.moves
                record.time = submission.time
                record.created_at = submission.created_at

            self._logger.info(
                f"[score] plays={record.play_count} best={record.best_score} "
                f"avg={record.average_score:.2f}"
            )
            return replace(record)

    def reset(self) -> None:
        with self._lock:
            self._record = None
            self._next_id = INITIAL_ID
        self._logger.info("[score] all scores cleared")
