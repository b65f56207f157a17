"""Request pipeline: auth, request building, success and error routing."""

import json
from datetime import datetime, timezone
from http import HTTPStatus

import httpx
import pytest
from structlog.testing import capture_logs

from paypal_api.core.config import Configuration, Environment
from paypal_api.core.domain.models import BillingPlan, PaymentList
from paypal_api.core.domain.query import QueryParameters
from paypal_api.core.errors import (
    DecodingError,
    ErrorShapeMismatch,
    PayPalAPIError,
    UnstructuredAPIError,
)
from paypal_api.core.services.pipeline import RequestPipeline

PLAN_PATH = "/v1/payments/billing-plans/"


@pytest.mark.asyncio
async def test_first_request_authenticates_before_sending(pipeline, paypal):
    paypal.add("GET", "/v1/payments/payment", httpx.Response(200, json={"count": 1, "payments": []}))

    result = await pipeline.get("v1/payments/payment", response_type=PaymentList)

    assert result.count == 1
    assert [r.url.path for r in paypal.requests] == ["/v1/oauth2/token", "/v1/payments/payment"]
    assert paypal.api_requests[0].headers["authorization"] == "Bearer A21AAF-test-token"
    assert paypal.api_requests[0].headers["accept"] == "application/json"


@pytest.mark.asyncio
async def test_token_reused_until_expired(pipeline, paypal, clock):
    paypal.add("DELETE", "/v1/things/1", httpx.Response(204))

    await pipeline.delete("v1/things/1")
    await pipeline.delete("v1/things/1")
    assert len(paypal.token_requests) == 1

    clock.advance(hours=10)
    await pipeline.delete("v1/things/1")
    assert len(paypal.token_requests) == 2


@pytest.mark.asyncio
async def test_created_response_decodes_into_model(pipeline, paypal):
    paypal.add(
        "POST",
        PLAN_PATH,
        httpx.Response(201, json={"id": "P-1", "name": "Plan", "description": "Monthly", "type": "INFINITE", "state": "CREATED"}),
    )

    plan = await pipeline.post(
        PLAN_PATH,
        body=BillingPlan(name="Plan", description="Monthly", type="INFINITE"),
        response_type=BillingPlan,
    )

    assert plan.id == "P-1"
    assert paypal.api_requests[0].headers["content-type"] == "application/json"
    sent = paypal.last_json()
    assert sent["name"] == "Plan"
    assert sent["type"] == "INFINITE"
    assert "id" not in sent


@pytest.mark.asyncio
async def test_no_content_returns_status_without_decoding(pipeline, paypal):
    paypal.add("POST", "/v1/payments/billing-agreements/I-1/suspend", httpx.Response(204))

    status = await pipeline.post("v1/payments/billing-agreements/I-1/suspend", body={"note": "x"})

    assert status is HTTPStatus.NO_CONTENT


@pytest.mark.asyncio
async def test_body_not_matching_model_is_a_decoding_error(pipeline, paypal):
    paypal.add("GET", PLAN_PATH + "P-1", httpx.Response(200, json={"type": "SOMETIMES"}))

    with pytest.raises(DecodingError):
        await pipeline.get(PLAN_PATH + "P-1", response_type=BillingPlan)


@pytest.mark.asyncio
async def test_empty_body_for_model_is_a_decoding_error(pipeline, paypal):
    paypal.add("GET", PLAN_PATH + "P-1", httpx.Response(200))

    with pytest.raises(DecodingError):
        await pipeline.get(PLAN_PATH + "P-1", response_type=BillingPlan)


@pytest.mark.asyncio
async def test_structured_error(pipeline, paypal):
    paypal.add(
        "POST",
        PLAN_PATH,
        httpx.Response(
            400,
            json={
                "name": "VALIDATION_ERROR",
                "message": "Invalid request - see details",
                "debug_id": "8c9e1a3e5b0c4",
                "information_link": "https://developer.paypal.com/docs/api/payments.billing-plans#errors",
                "details": [{"field": "name", "issue": "This field is required."}],
            },
        ),
    )

    with pytest.raises(PayPalAPIError) as info:
        await pipeline.post(PLAN_PATH, body={}, response_type=BillingPlan)

    error = info.value
    assert error.status == 400
    assert error.name == "VALIDATION_ERROR"
    assert error.error_message == "Invalid request - see details"
    assert error.debug_id == "8c9e1a3e5b0c4"
    assert error.details[0].field == "name"
    assert error.details[0].issue == "This field is required."
    assert error.to_dict()["details"] == [{"field": "name", "issue": "This field is required."}]


@pytest.mark.asyncio
async def test_plain_text_error_is_unstructured(pipeline, paypal):
    paypal.add(
        "GET",
        "/v1/payments/payment",
        httpx.Response(500, text="Internal Server Error", headers={"content-type": "text/plain"}),
    )

    with pytest.raises(UnstructuredAPIError) as info:
        await pipeline.get("v1/payments/payment", response_type=PaymentList)

    assert info.value.status == 500
    assert info.value.body == "Internal Server Error"


@pytest.mark.asyncio
async def test_unknown_json_error_shape_is_not_swallowed(pipeline, paypal):
    paypal.add("GET", "/v1/payments/payment", httpx.Response(503, json={"unexpected": True}))

    with pytest.raises(ErrorShapeMismatch) as info:
        await pipeline.get("v1/payments/payment", response_type=PaymentList)

    assert info.value.status == 503


@pytest.mark.asyncio
async def test_query_string_is_appended(pipeline, paypal):
    paypal.add("GET", PLAN_PATH, httpx.Response(200, json={"plans": []}))
    parameters = QueryParameters(
        page=2,
        page_size=5,
        total_count_required=True,
        start_time=datetime(2024, 1, 1, tzinfo=timezone.utc),
        custom={"status": "ACTIVE"},
    )

    await pipeline.get(PLAN_PATH, parameters=parameters)

    url = paypal.api_requests[0].url
    assert url.params["page"] == "2"
    assert url.params["page_size"] == "5"
    assert url.params["total_count_required"] == "true"
    assert url.params["start_time"] == "2024-01-01T00:00:00Z"
    assert url.params["status"] == "ACTIVE"


@pytest.mark.asyncio
async def test_empty_query_adds_no_question_mark(pipeline, paypal):
    paypal.add("GET", PLAN_PATH, httpx.Response(200, json={"plans": []}))

    await pipeline.get(PLAN_PATH, parameters=QueryParameters())

    assert str(paypal.api_requests[0].url) == "https://api.sandbox.paypal.com/v1/payments/billing-plans/"


@pytest.mark.asyncio
async def test_production_environment_base_url(transport, paypal, clock):
    from paypal_api.core.services.auth import TokenManager

    config = Configuration(id="id", secret="secret", environment=Environment.PRODUCTION)
    pipeline = RequestPipeline(config, transport, TokenManager(config, transport, clock=clock))
    paypal.add("DELETE", "/v1/things/1", httpx.Response(204))

    await pipeline.delete("v1/things/1")

    assert {r.url.host for r in paypal.requests} == {"api.paypal.com"}


@pytest.mark.asyncio
async def test_unauthenticated_send_uses_form_body(pipeline, paypal):
    paypal.add("POST", "/v1/public", httpx.Response(200, json={"ok": True}))

    result = await pipeline.send(
        "POST",
        "v1/public",
        body={"a": "1", "b": "two words"},
        response_type=dict,
        requires_auth=False,
    )

    assert result == {"ok": True}
    assert paypal.token_requests == []
    request = paypal.api_requests[0]
    assert "authorization" not in request.headers
    assert request.content == b"a=1&b=two+words"


@pytest.mark.asyncio
async def test_api_errors_logged_only_when_enabled(config, transport, tokens, paypal):
    paypal.add("GET", "/v1/broken", httpx.Response(500, text="boom", headers={"content-type": "text/plain"}))

    quiet = RequestPipeline(config, transport, tokens)
    with capture_logs() as logs:
        with pytest.raises(UnstructuredAPIError):
            await quiet.get("v1/broken")
    assert not [entry for entry in logs if entry["event"] == "api.error"]

    verbose = RequestPipeline(config, transport, tokens, log_api_error=True)
    with capture_logs() as logs:
        with pytest.raises(UnstructuredAPIError):
            await verbose.get("v1/broken")
    errors = [entry for entry in logs if entry["event"] == "api.error"]
    assert len(errors) == 1
    assert errors[0]["status"] == 500
    assert errors[0]["body"] == "boom"
    assert errors[0]["request_headers"]["Authorization"] == "<redacted>"


@pytest.mark.asyncio
async def test_list_response_type(pipeline, paypal):
    paypal.add("GET", "/v1/items", httpx.Response(200, content=json.dumps([{"href": "h", "rel": "self"}])))

    from paypal_api.core.domain.models import LinkDescription

    links = await pipeline.get("v1/items", response_type=list[LinkDescription])

    assert links == [LinkDescription(href="h", rel="self")]
