"""
End-to-end categorization through the real prompt builder, dispatcher,
parser and classifier. Provider HTTP is served by httpx.MockTransport.
"""

import json

import httpx
import pytest

from mail_categorizer.models import Category, Email, EmailAddress, ProviderName

pytestmark = pytest.mark.integration


@pytest.fixture
def email():
    return Email(
        sender=EmailAddress(name="Sam Lee", address="sam@example.com"),
        subject="Re: intro call",
        body="Thanks for the invite, I booked Thursday 10am on your calendar.",
    )


@pytest.mark.asyncio
async def test_preferred_provider_receives_prompt(
    categorizer_factory, provider_transport, openai_body, email
):
    transport = provider_transport(
        openai_body({"category": "MeetingBooked", "reasoning": "Booked", "replies": ["Great!"]})
    )
    categorizer = categorizer_factory(
        transport=transport,
        OPENAI_API_KEY="sk-openai",
        GROQ_API_KEY="gsk-groq",
        MISTRAL_API_KEY="mk",
    )

    result = await categorizer.categorize_email(email)
    await categorizer.close()

    assert categorizer.active_provider is ProviderName.GROQ
    assert result.category is Category.MEETING_BOOKED
    assert result.reply_texts == ["Great!"]

    request = transport.requests[0]
    assert request.url.host == "api.groq.com"
    prompt = json.loads(request.content)["messages"][0]["content"]
    assert "From: Sam Lee <sam@example.com>" in prompt
    assert "Subject: Re: intro call" in prompt
    assert "Interested, MeetingBooked, NotInterested, Spam, OutOfOffice" in prompt


@pytest.mark.asyncio
async def test_anthropic_with_prose_wrapped_answer(categorizer_factory, provider_transport, email):
    text = (
        "Here is my analysis:\n```json\n"
        '{"category": "Interested", "reasoning": "Wants {more} info", "replies": []}\n```'
    )
    transport = provider_transport({"content": [{"type": "text", "text": text}]})
    categorizer = categorizer_factory(transport=transport, ANTHROPIC_API_KEY="sk-ant")

    result = await categorizer.categorize_email(email)
    await categorizer.close()

    assert result.category is Category.INTERESTED
    assert result.reasoning == "Wants {more} info"
    assert result.reply_texts == ["Thank you for your email. I will get back to you shortly."]
    assert transport.requests[0].headers["x-api-key"] == "sk-ant"


@pytest.mark.asyncio
async def test_ollama_without_credentials(categorizer_factory, provider_transport, email):
    answer = json.dumps({"category": "Spam", "reasoning": "Phishing", "replies": ["Ignore."]})
    transport = provider_transport({"message": {"role": "assistant", "content": answer}})
    categorizer = categorizer_factory(
        transport=transport, OLLAMA_API_BASE_URL="http://localhost:11434"
    )

    result = await categorizer.categorize_email(email)
    await categorizer.close()

    assert categorizer.active_provider is ProviderName.OLLAMA
    assert result.category is Category.SPAM
    assert str(transport.requests[0].url) == "http://localhost:11434/api/chat"


@pytest.mark.asyncio
async def test_network_failure_uses_rules(categorizer_factory, email):
    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    categorizer = categorizer_factory(
        transport=httpx.MockTransport(_refuse), DEEPSEEK_API_KEY="sk-deep"
    )

    result = await categorizer.categorize_email(email)
    await categorizer.close()

    assert result.category is Category.MEETING_BOOKED
    assert result.reasoning.startswith("Rule-based categorization (matched")


@pytest.mark.asyncio
async def test_batch_mixes_ai_and_fallback(categorizer_factory, openai_body):
    def _handler(request):
        prompt = json.loads(request.content)["messages"][0]["content"]
        if "Subject: broken" in prompt:
            return httpx.Response(500, text="internal error")
        return httpx.Response(
            200,
            json=openai_body({"category": "NotInterested", "reasoning": "Declined", "replies": ["OK"]}),
        )

    categorizer = categorizer_factory(
        transport=httpx.MockTransport(_handler), MISTRAL_API_KEY="mk", BATCH_CONCURRENCY=2
    )
    emails = [
        Email(subject="no thanks", body="We will pass."),
        Email(subject="broken", body="Automatic reply: out of office"),
        Email(subject="later", body="Not at this time."),
    ]

    results = await categorizer.categorize_batch(emails)
    await categorizer.close()

    assert [r.category for r in results] == [
        Category.NOT_INTERESTED,
        Category.OUT_OF_OFFICE,
        Category.NOT_INTERESTED,
    ]
    assert results[1].reasoning.startswith("Rule-based")
