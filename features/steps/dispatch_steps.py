"""
Step definitions for Cloudflare API dispatch scenarios.
"""

from unittest.mock import Mock

import requests
from behave import given, then, when

from cloudflare_dns_manager.core.cache import ResponseCache
from cloudflare_dns_manager.core.credentials import CredentialVerifier
from cloudflare_dns_manager.core.dispatcher import RequestDispatcher
from cloudflare_dns_manager.core.exceptions import CloudflareAPIError
from cloudflare_dns_manager.providers.retry import RetryDriver
from cloudflare_dns_manager.providers.transport import HTTPTransport


def _envelope_response(status_code, result=None):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = {
        "success": 200 <= status_code < 300,
        "errors": [],
        "messages": [],
        "result": result,
    }
    return response


@given("the Cloudflare API is reachable")
def step_impl(context):
    """Serve the zone list for every request."""
    context.session = Mock()
    context.session.request.side_effect = lambda method, url, **kwargs: _envelope_response(
        200, context.zones
    )


@given("a dispatcher with a default API token")
def step_impl(context):
    """Wire a dispatcher around the mocked session."""
    transport = HTTPTransport(session=context.session, default_token=context.default_token)
    context.dispatcher = RequestDispatcher(
        RetryDriver(transport), cache=ResponseCache(clock=context.clock)
    )


@given("the Cloudflare API is unreachable")
def step_impl(context):
    """Fail every connection attempt."""
    context.session.request.side_effect = requests.ConnectionError("connection refused")


@given("the Cloudflare API answers with status {status:d}")
def step_impl(context, status):
    """Answer every request with an error status."""
    context.session.request.side_effect = None
    context.session.request.return_value = _envelope_response(status)


@when('I dispatch "{method}" "{path}" with a TTL of {ttl:d} seconds')
def step_impl(context, method, path, ttl):
    """Dispatch one request, remembering the result or error."""
    try:
        context.result = context.dispatcher.dispatch(method, path, ttl_seconds=ttl)
    except CloudflareAPIError as e:
        context.error = e


@when("{seconds:d} seconds pass")
def step_impl(context, seconds):
    """Move the cache clock forward."""
    context.clock.advance(seconds)


@when('I verify the token "{token}"')
def step_impl(context, token):
    """Verify a candidate token."""
    context.result = CredentialVerifier(context.dispatcher).verify(token)


@then("{count:d} network call has been made")
@then("{count:d} network calls have been made")
def step_impl(context, count):
    """Check how many HTTP requests reached the session."""
    assert context.session.request.call_count == count, (
        f"expected {count} calls, got {context.session.request.call_count}"
    )


@then('the cache holds an entry for "{path}"')
def step_impl(context, path):
    """Check that path is cached."""
    assert path in context.dispatcher.cache


@then('the cache entry for "{path}" was stored just now')
def step_impl(context, path):
    """Check that the entry for path was refreshed at the current time."""
    assert context.dispatcher.cache.lookup(path).stored_at == context.clock.now


@then("the cache is empty")
def step_impl(context):
    """Check that nothing was cached."""
    assert len(context.dispatcher.cache) == 0


@then('the dispatch fails with "{error_name}"')
def step_impl(context, error_name):
    """Check the type of the dispatch error."""
    assert context.error is not None, "dispatch did not fail"
    assert type(context.error).__name__ == error_name, (
        f"expected {error_name}, got {type(context.error).__name__}"
    )


@then("the token is reported as invalid")
def step_impl(context):
    """Check that verification returned False."""
    assert context.result is False
