import inspect
import json

from stellar_horizon.web_tools import WebResponse


class FakeAsyncMethod:
    def __init__(self, return_value=None, side_effect=None):
        self.return_value = return_value
        self.side_effect = side_effect
        self._calls = []

    async def __call__(self, *args, **kwargs):
        self._calls.append((args, kwargs))
        if self.side_effect is not None:
            result = self.side_effect(*args, **kwargs)
            if inspect.isawaitable(result):
                return await result
            return result
        return self.return_value

    @property
    def call_count(self):
        return len(self._calls)

    @property
    def call_args_list(self):
        return list(self._calls)

    def assert_not_called(self):
        assert self.call_count == 0, f"Expected 0 calls, got {self.call_count}"


def json_response(payload, status: int = 200) -> WebResponse:
    return WebResponse(
        status=status,
        body=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json"},
    )


class FakeTransport:
    """Replays queued responses; an exception in the queue is raised instead."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.get = FakeAsyncMethod(side_effect=self._next)
        self.closed = False

    def queue(self, response):
        self.responses.append(response)

    def _next(self, url):
        if not self.responses:
            raise AssertionError(f"unexpected request {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def urls(self):
        return [args[0] for args, _ in self.get.call_args_list]

    async def close(self):
        self.closed = True


class FakeXdrCodec:
    """Returns ("decoded", type_name, blob) unless told to fail for a blob."""

    def __init__(self, fail_on=None):
        self.fail_on = set(fail_on or ())
        self.calls = []

    def decode(self, type_name, blob):
        self.calls.append((type_name, blob))
        if blob in self.fail_on:
            raise ValueError(f"malformed {type_name}")
        return ("decoded", type_name, blob)
