# petplanet/core/test_concurrency.py
import threading
import time

from flask import session

from petplanet.core.concurrency import CancelToken, Debouncer, RequestGeneration, all_settled


def test_all_settled_keeps_order_and_failures():
    def slow():
        time.sleep(0.05)
        return 'slow'

    def boom():
        raise ValueError('bad')

    results = all_settled([slow, boom, lambda: 3])

    assert [r.status for r in results] == ['fulfilled', 'rejected', 'fulfilled']
    assert results[0].value == 'slow'
    assert isinstance(results[1].reason, ValueError)
    assert results[2].value == 3


def test_all_settled_empty():
    assert all_settled([]) == []


def test_request_generation_only_latest_is_current():
    generation = RequestGeneration()
    first = generation.next()
    second = generation.next()
    assert not generation.is_current(first)
    assert generation.is_current(second)


def test_cancel_token():
    token = CancelToken()
    assert token.cancelled is False
    token.cancel()
    assert token.cancelled is True


def test_debouncer_fires_only_last_call():
    fired = []
    done = threading.Event()

    def record(term):
        fired.append(term)
        done.set()

    debouncer = Debouncer(0.05, record)
    for term in ['c', 'ca', 'cat']:
        debouncer(term)

    assert done.wait(1.0)
    time.sleep(0.1)
    assert fired == ['cat']
    assert debouncer.pending is False


def test_debouncer_flush_and_cancel():
    fired = []
    debouncer = Debouncer(10, fired.append)

    debouncer('dog')
    assert debouncer.pending
    debouncer.flush()
    assert fired == ['dog']

    debouncer('cat')
    debouncer.cancel()
    assert not debouncer.pending
    assert fired == ['dog']


def test_debouncer_wait_runs_with_copied_request_context(app):
    seen = []
    debouncer = Debouncer(0.01, lambda: seen.append(session.get('token')))
    assert debouncer.wait(0) is True

    with app.test_request_context('/'):
        session['token'] = 'abc'
        debouncer()

    assert debouncer.wait(1.0) is True
    assert seen == ['abc']
    assert not debouncer.pending


def test_debouncer_wait_released_by_cancel():
    debouncer = Debouncer(10, lambda: None)
    debouncer()
    assert debouncer.wait(0.01) is False
    debouncer.cancel()
    assert debouncer.wait(0.01) is True
