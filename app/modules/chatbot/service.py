"""
Rule-based assistant.

Messages are lower-cased and checked against the rules in order; the first
matching pattern picks the reply. Event intents answer from the event store.
"""

import datetime as dt
import re
from typing import Callable, List, Optional, Tuple

from app.config import settings
from app.database.json_store import RecordStore
from app.database.records import utc_now
from app.modules.chatbot.schemas import ChatResponse
from app.modules.events.models import Event

GREETING = (
    "Hello! I'm your community assistant. I can help you find events, activities, "
    "and answer questions about the platform. What would you like to know?"
)
HELP = (
    "I can help you with:\n"
    "- Finding upcoming events and activities\n"
    "- Searching events by category (Health, Education, Social, Technology)\n"
    "- Getting event details and locations\n"
    "- Learning about our community features\n"
    "- Finding caregivers and support services\n\n"
    "Just ask me anything!"
)
LOCATION = (
    "I can help you find events near you! The Events page lets you search by location, "
    "and the map shows what's happening around you."
)
CAREGIVER = (
    "We have a Caregivers section where you can find caregivers offering services like "
    "babysitting and elderly care. They're rated by the community and you can contact them directly."
)
COMMUNITY = (
    "You can join communities for different interests and neighborhoods. "
    "Visit the Communities page to explore and join groups that interest you."
)
REGISTER = (
    "To join, click 'Sign Up' in the navigation menu. Registration is quick and free! "
    "Once registered you can create events, join communities and connect with caregivers."
)
THANKS = "You're welcome! Is there anything else I can help you with?"
GOODBYE = "Goodbye! Feel free to chat with me anytime you need help. Have a great day!"
FALLBACK = (
    "I'm not sure I understand that question. Here are some things you can ask me:\n"
    "- 'What events are available?'\n"
    "- 'Show me health activities'\n"
    "- 'How do I find caregivers?'\n"
    "- 'What communities can I join?'\n\n"
    "What would you like to know?"
)


def _format_date(value: dt.date, with_year: bool = True) -> str:
    text = f"{value:%b} {value.day}"
    return f"{text}, {value.year}" if with_year else text


class ChatbotService:
    def __init__(self, store: RecordStore):
        self.store = store
        self.rules: List[Tuple[re.Pattern, Callable[[str], str]]] = [
            (re.compile(r"^(hi|hello|hey|greetings|good morning|good afternoon|good evening)"), lambda m: GREETING),
            (re.compile(r"what can you do|help|how to use|capabilities"), lambda m: HELP),
            (re.compile(r"events?|activities?|what('s| is) (happening|available|on)|things to do"), self._events_reply),
            (re.compile(r"health|fitness|wellness|exercise|yoga"), lambda m: self._category_reply("Health")),
            (re.compile(r"education|learning|class|course|workshop|skill"), lambda m: self._category_reply("Education")),
            (re.compile(r"social|community|gathering|meetup|networking"), lambda m: self._category_reply("Social")),
            (re.compile(r"tech|technology|digital|computer|coding"), lambda m: self._category_reply("Technology")),
            (re.compile(r"near me|nearby|around|location|where"), lambda m: LOCATION),
            (re.compile(r"caregiver|babysit|elderly care|care service"), lambda m: CAREGIVER),
            (re.compile(r"communities|group|join"), lambda m: COMMUNITY),
            (re.compile(r"register|sign up|create account"), lambda m: REGISTER),
            (re.compile(r"thank|appreciate"), lambda m: THANKS),
            (re.compile(r"bye|see you|exit"), lambda m: GOODBYE),
        ]

    def reply(self, message: str) -> ChatResponse:
        return ChatResponse(message=self.process_message(message), timestamp=utc_now())

    def process_message(self, message: str) -> str:
        text = message.strip().lower()
        for pattern, respond in self.rules:
            if pattern.search(text):
                return respond(text)
        return FALLBACK

    def upcoming_events(self, category: Optional[str] = None, today: Optional[dt.date] = None) -> List[Event]:
        """Events dated today or later, soonest first"""
        today = today or dt.date.today()
        events = [
            e for e in self.store.events
            if e.date >= today and (category is None or e.category == category)
        ]
        events.sort(key=lambda e: e.date)
        return events[:settings.chatbot_max_events]

    def _events_reply(self, message: str) -> str:
        events = self.upcoming_events()
        if not events:
            return "I don't see any upcoming events at the moment. Please check back later or create your own event!"
        lines = ["Here are some upcoming events:", ""]
        for index, event in enumerate(events, start=1):
            lines.append(f"{index}. **{event.title}**")
            lines.append(f"   {_format_date(event.date)} at {event.time or 'TBA'}")
            lines.append(f"   {event.location}")
            lines.append(f"   {event.category}")
            lines.append(f"   ${event.price:g}" if event.price > 0 else "   Free")
            lines.append("")
        lines.append("Visit the Events page to see more details and register!")
        return "\n".join(lines)

    def _category_reply(self, category: str) -> str:
        events = self.upcoming_events(category=category)
        if not events:
            return (
                f"I don't see any upcoming {category} events right now. "
                f"Check out other categories or create your own {category} event!"
            )
        lines = [f"Here are upcoming {category} events:", ""]
        for index, event in enumerate(events, start=1):
            lines.append(f"{index}. **{event.title}**")
            lines.append(f"   {_format_date(event.date, with_year=False)} at {event.time or 'TBA'}")
            lines.append(f"   {event.location}")
            if event.price > 0:
                lines.append(f"   ${event.price:g}")
            lines.append("")
        lines.append(f"Check the Events page for more {category} activities!")
        return "\n".join(lines)
