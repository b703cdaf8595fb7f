"""Testes do use case de campanha e de evento de membro com fakes."""

from __future__ import annotations

from typing import Any

import pytest

from api.payload_builders.unifonic import UnifonicPayloadBuilder
from api.validators.campaign import validate_recipients
from app.domain.member_event import MemberEvent
from app.protocols.models import CampaignRequest
from app.use_cases.campaigns import SendCampaignUseCase, SendMemberEventUseCase
from utils.errors import MissingTemplateError, ProviderRequestError, ValidationError


class FakeStore:
    def __init__(self, templates: list) -> None:
        self._templates = templates

    def list_templates(self) -> list:
        return self._templates


class FakeClient:
    def __init__(self, failing: set[str] | None = None) -> None:
        self.sent: list[dict[str, Any]] = []
        self._failing = failing or set()

    async def send_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        if payload["recipient"]["contact"] in self._failing:
            raise ProviderRequestError("boom")
        self.sent.append(payload)
        return {"messageId": f"msg-{len(self.sent)}"}

    async def get_message_templates(self, name=None, language=None) -> dict[str, Any]:
        return {"data": []}


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def use_case(catalog_templates, client: FakeClient) -> SendCampaignUseCase:
    return SendCampaignUseCase(
        template_store=FakeStore(catalog_templates),
        builder=UnifonicPayloadBuilder(),
        client=client,
        recipient_validator=validate_recipients,
    )


@pytest.mark.asyncio
async def test_sends_to_every_recipient(use_case: SendCampaignUseCase, client: FakeClient) -> None:
    request = CampaignRequest(
        template_id="1012837465920003",
        recipients="+971500000001, +971500000002",
        variables={"1": "Maria"},
    )

    result = await use_case.execute(request)

    assert result.sent == 2
    assert result.failed == 0
    assert result.success
    assert [p["recipient"]["contact"] for p in client.sent] == ["+971500000001", "+971500000002"]
    body = client.sent[0]["content"]["components"][0]
    assert body["parameters"][0]["text"] == "Maria"
    assert body["parameters"][1]["text"] == "1200"
    assert result.results[0].message == "Successfully sent message to +971500000001"


@pytest.mark.asyncio
async def test_invalid_recipients_stop_before_network(
    use_case: SendCampaignUseCase,
    client: FakeClient,
) -> None:
    request = CampaignRequest(template_id="mj_demo_123", recipients=["+971500000001", "abc"])

    with pytest.raises(ValidationError, match="Invalid phone numbers entered"):
        await use_case.execute(request)
    assert client.sent == []


@pytest.mark.asyncio
async def test_unapproved_template_is_missing(use_case: SendCampaignUseCase) -> None:
    request = CampaignRequest(template_id="flash_sale_draft", recipients="+971500000001")

    with pytest.raises(MissingTemplateError):
        await use_case.execute(request)


@pytest.mark.asyncio
async def test_provider_failure_is_reported_per_recipient(catalog_templates) -> None:
    client = FakeClient(failing={"+971500000002"})
    use_case = SendCampaignUseCase(
        template_store=FakeStore(catalog_templates),
        builder=UnifonicPayloadBuilder(),
        client=client,
        recipient_validator=validate_recipients,
    )

    result = await use_case.execute(
        CampaignRequest(template_id="mj_demo_123", recipients=["+971500000001", "+971500000002"])
    )

    assert result.sent == 1
    assert result.failed == 1
    assert not result.success
    failed = result.results[1]
    assert failed.error_code == "PROVIDER_ERROR"
    assert failed.message == "Failed to send message. Please try again."


@pytest.mark.asyncio
async def test_member_event_uses_event_values(
    use_case: SendCampaignUseCase,
    client: FakeClient,
) -> None:
    event = MemberEvent.model_validate(
        {
            "Data": {"templateName": "mj_demo_123", "body_text2": "950"},
            "Membership": {"PhoneNumber": "+971500000009"},
        }
    )

    outcome = await SendMemberEventUseCase(use_case).execute(event)

    assert outcome.success
    params = client.sent[0]["content"]["components"][0]["parameters"]
    assert [p["text"] for p in params] == ["Alok", "950"]


@pytest.mark.asyncio
async def test_member_event_template_name_fallback(
    use_case: SendCampaignUseCase,
    client: FakeClient,
) -> None:
    event = MemberEvent.model_validate({"Membership": {"PhoneNumber": "+971500000009"}})

    outcome = await SendMemberEventUseCase(use_case).execute(
        event, template_name="sandbox_image_message"
    )

    assert outcome.success
    assert client.sent[0]["content"]["name"] == "sandbox_image_message"


@pytest.mark.asyncio
async def test_member_event_requires_template_and_phone(use_case: SendCampaignUseCase) -> None:
    member_events = SendMemberEventUseCase(use_case)

    with pytest.raises(ValidationError, match="templateName is required"):
        await member_events.execute(MemberEvent.model_validate({}))

    with pytest.raises(ValidationError, match="PhoneNumber is required"):
        await member_events.execute(
            MemberEvent.model_validate({"Data": {"templateName": "mj_demo_123"}})
        )
