import datetime as dt

import pytest

from app.modules.chatbot.service import FALLBACK, GOODBYE, GREETING, HELP, THANKS, ChatbotService
from app.modules.events.models import Event
from tests.factories import days_from_today


@pytest.fixture
def chatbot(store):
    return ChatbotService(store)


def add_event(store, title, days, category="Social", price=0):
    return store.events.add(Event(
        title=title, date=days_from_today(days), time="10:00", location="Hall",
        category=category, organizer_id="u1", price=price,
    ))


@pytest.mark.parametrize("message,expected", [
    ("Hello there", GREETING),
    ("  HEY  ", GREETING),
    ("what can you do?", HELP),
    ("thank you so much", THANKS),
    ("ok bye", GOODBYE),
    ("qwerty", FALLBACK),
])
def test_static_replies(chatbot, message, expected):
    assert chatbot.process_message(message) == expected


def test_greeting_must_lead_the_message(chatbot):
    assert chatbot.process_message("well hi") != GREETING


def test_first_matching_rule_wins(chatbot):
    # "help" is checked before "events"
    assert chatbot.process_message("help me find events") == HELP


def test_events_reply_lists_upcoming_only(chatbot, store):
    add_event(store, "Past picnic", -3)
    add_event(store, "Later quiz", 10, price=12.5)
    add_event(store, "Soon walk", 1)
    reply = chatbot.process_message("what events are on?")
    assert "Past picnic" not in reply
    assert reply.index("Soon walk") < reply.index("Later quiz")
    assert "$12.5" in reply
    assert "Free" in reply


def test_events_reply_when_empty(chatbot):
    assert "don't see any upcoming events" in chatbot.process_message("any activities?")


def test_category_reply(chatbot, store):
    add_event(store, "Sunrise yoga", 2, category="Health")
    add_event(store, "Board games", 2, category="Social")
    reply = chatbot.process_message("I like yoga")
    assert "Here are upcoming Health events" in reply
    assert "Sunrise yoga" in reply
    assert "Board games" not in reply


def test_category_reply_when_empty(chatbot):
    assert "upcoming Technology events" in chatbot.process_message("coding nights?")


def test_upcoming_events_includes_today_and_caps(chatbot, store):
    today = dt.date.today()
    for i in range(7):
        add_event(store, f"E{i}", i)
    events = chatbot.upcoming_events(today=today)
    assert [e.title for e in events] == ["E0", "E1", "E2", "E3", "E4"]


async def test_chat_endpoint(api_client):
    resp = await api_client.post("/api/chatbot/chat", json={"message": "hello"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == GREETING
    assert body["timestamp"]


async def test_chat_endpoint_rejects_empty(api_client):
    resp = await api_client.post("/api/chatbot/chat", json={"message": ""})
    assert resp.status_code == 400
