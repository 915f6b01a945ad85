"""
- Provide executors that make the background word fetch deterministic
- Provide a session fixture with a known secret
- Provide a client fixture (TestClient(app)) whose session dependency is overridden,
  so no test ever talks to the real word service.
"""
import pytest
from concurrent.futures import Executor, Future

from fastapi.testclient import TestClient

from wordish.main import app, get_session
from wordish.session import GameSession


class ImmediateExecutor(Executor):
    """Runs the fetch right away in the calling thread."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


class ManualExecutor(Executor):
    """
    Calls the provider right away but holds the answer until the test releases it.
    Lets a test deliver fetches out of order (stale-response checks).
    """

    def __init__(self):
        self.pending = []

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            outcome = (fn(*args, **kwargs), None)
        except Exception as exc:
            outcome = (None, exc)
        self.pending.append((future, outcome))
        return future

    def release(self, index: int = 0):
        future, (result, error) = self.pending.pop(index)
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)


def make_provider(word: str):
    """Provider that ignores the length and always returns `word`."""
    def provider(length: int) -> str:
        return word
    return provider


@pytest.fixture
def immediate_executor():
    return ImmediateExecutor()


@pytest.fixture
def manual_executor():
    return ManualExecutor()


@pytest.fixture
def session(immediate_executor):
    # Secret is hardcoded so we know what outcome should be
    return GameSession(provider=make_provider("crane"), executor=immediate_executor)


@pytest.fixture
def client(session):
    """Force the app to use our test session for every request."""
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
