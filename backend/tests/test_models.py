import pytest

from scorekeeper.models import InvalidSubmission, ScoreSubmission


def test_full_payload():
    sub = ScoreSubmission.from_payload({'score': 100, 'moves': 20, 'time': 30, 'created_at': 't1'})
    assert sub == ScoreSubmission(score=100, moves=20, time=30, created_at='t1')


def test_optional_fields_default_to_zero_values():
    sub = ScoreSubmission.from_payload({'score': -3})
    assert sub == ScoreSubmission(score=-3, moves=0, time=0, created_at='')


def test_unknown_keys_are_ignored():
    sub = ScoreSubmission.from_payload({'score': 1, 'player': 'Alice'})
    assert sub.score == 1


@pytest.mark.parametrize('payload', [
    None,
    [],
    'score',
    {},
    {'moves': 3},
    {'score': '100'},
    {'score': 1.5},
    {'score': True},
    {'score': 2 ** 63},
    {'score': -2 ** 63 - 1},
    {'score': 1, 'moves': 10 ** 400},
    {'score': 1, 'time': 2 ** 64},
    {'score': 1, 'moves': 'many'},
    {'score': 1, 'time': None},
    {'score': 1, 'created_at': 12345},
])
def test_rejected_payloads(payload):
    with pytest.raises(InvalidSubmission):
        ScoreSubmission.from_payload(payload)


def test_int64_bounds_are_accepted():
    sub = ScoreSubmission.from_payload({'score': 2 ** 63 - 1, 'moves': -2 ** 63, 'time': 0})
    assert sub.score == 2 ** 63 - 1
    assert sub.moves == -2 ** 63
