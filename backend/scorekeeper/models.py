from dataclasses import dataclass


class InvalidSubmission(ValueError):
    """Raised when a saveScore payload can't be turned into a ScoreSubmission."""


# Numeric fields are signed 64-bit on the wire
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _is_int(value) -> bool:
    # bool is an int subclass, but true/false is not a score
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ScoreSubmission:
    score: int
    moves: int = 0
    time: int = 0
    created_at: str = ''

    @classmethod
    def from_payload(cls, data) -> 'ScoreSubmission':
        """Build a submission from a decoded JSON body.

        `score` is required; `moves`, `time` and `created_at` fall back to
        their zero values when missing. Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise InvalidSubmission(f'expected a JSON object, got {type(data).__name__}')
        if 'score' not in data:
            raise InvalidSubmission('missing field: score')

        fields = {}
        for name in ('score', 'moves', 'time'):
            if name not in data:
                continue
            value = data[name]
            if not _is_int(value):
                raise InvalidSubmission(f'field {name!r} must be an integer, got {value!r}')
            if not INT64_MIN <= value <= INT64_MAX:
                raise InvalidSubmission(f'field {name!r} out of range: {value}')
            fields[name] = value

        if 'created_at' in data:
            created_at = data['created_at']
            if not isinstance(created_at, str):
                raise InvalidSubmission(f'field created_at must be a string, got {created_at!r}')
            fields['created_at'] = created_at

        return cls(**fields)


@dataclass
class AggregateRecord:
    id: int
    best_score: int
    average_score: float
    play_count: int
    latest_score: int
    moves: int
    time: int
    created_at: str

    def to_dict(self):
        return {
            'id': self.id,
            'best_score': self.best_score,
            'average_score': float(self.average_score),
            'play_count': self.play_count,
            'latest_score': self.latest_score,
            'moves': self.moves,
            'time': self.time,
            'created_at': self.created_at,
        }
