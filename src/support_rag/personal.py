"""Profile-centric replies for questions about the user's own participation.

Nothing here reads the corpus. Both the context block and the reply templates
are filled from the `UserProfile` supplied by the session layer.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from .schema import UserProfile


def _format_date(value: str) -> str:
    """Render ISO dates as ``February 15, 2026``; other strings pass through."""
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


# ---------------------------------------------------------------------------
# Context blocks
# ---------------------------------------------------------------------------


def _certificate_block(profile: UserProfile) -> str:
    lines = [
        f"User: {profile.name}",
        f"Total Certificates Earned: {len(profile.certificates)}",
        "Certificates:",
        *(f"- {cert.event_name} (Issued: {cert.issued_date})" for cert in profile.certificates),
        'You can download your certificates from the "My Certificates" section.',
    ]
    return "\n".join(lines)


def _registration_block(profile: UserProfile) -> str:
    lines = [
        f"User: {profile.name}",
        "Current Registrations:",
        *(f"- {event.name} ({event.status})" for event in profile.registered_events),
        f"Total Events Attended: {len(profile.attended_events)}",
    ]
    return "\n".join(lines)


def _attendance_block(profile: UserProfile) -> str:
    lines = [
        f"User: {profile.name}",
        f"Attendance Rate: {profile.attendance_percent}%",
        "Recently Attended Events:",
        *(f"- {event.name} ({event.date})" for event in profile.attended_events),
        f"Total Events Attended: {len(profile.attended_events)}",
    ]
    return "\n".join(lines)


def _summary_block(profile: UserProfile) -> str:
    lines = [f"User: {profile.name}"]
    if profile.department or profile.year is not None:
        lines.append(f"Department: {profile.department}, Year {profile.year if profile.year is not None else '-'}")
    lines.extend(
        [
            f"Total Events Participated: {profile.events_participated}",
            f"Total Certificates: {len(profile.certificates)}",
            f"Attendance Rate: {profile.attendance_percent}%",
        ]
    )
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Replies
# ---------------------------------------------------------------------------


def _certificate_reply(query_lower: str, profile: UserProfile, context_text: str) -> str:
    certificates = profile.certificates
    if not certificates:
        return (
            "You haven't earned any certificates yet. 🎓\n\n"
            "To earn your first certificate:\n"
            "• Register for upcoming events\n"
            "• Attend at least 80% of the event duration\n"
            "• Complete any post-event requirements\n\n"
            'Certificates appear in the "My Certificates" section 7-10 working days after the event.'
        )

    if "how many" in query_lower or "total" in query_lower:
        listing = "\n".join(
            f"{idx}. **{cert.event_name}** - Issued on {_format_date(cert.issued_date)}"
            for idx, cert in enumerate(certificates, start=1)
        )
        return (
            f"Based on your profile, you have earned **{_plural(len(certificates), 'certificate')}** so far! 🎉\n\n"
            f"Here are your certificates:\n{listing}\n\n"
            'You can download these certificates anytime from the "My Certificates" section in your '
            "profile. Keep participating in events to earn more! 🏆"
        )

    if "where" in query_lower or "download" in query_lower:
        listing = "\n".join(f"• {cert.event_name}" for cert in certificates)
        return (
            'You can download your certificates from the **"My Certificates"** section. Here\'s how:\n\n'
            "1. Click on your profile icon\n"
            '2. Navigate to "My Certificates"\n'
            "3. Find the certificate you want\n"
            '4. Click the "Download" button\n\n'
            f"You currently have {_plural(len(certificates), 'certificate')} available:\n{listing}\n\n"
            "Certificates are typically issued within 7-10 working days after event completion. ✅"
        )

    listing = "\n".join(
        f"{idx}. {cert.event_name} (Issued: {_format_date(cert.issued_date)})"
        for idx, cert in enumerate(certificates, start=1)
    )
    return (
        f"You have **{_plural(len(certificates), 'certificate')}** in your account:\n\n{listing}\n\n"
        "To earn more certificates:\n"
        "• Register for upcoming events\n"
        "• Attend at least 80% of the event duration\n"
        "• Complete any post-event requirements\n"
        '• Download from "My Certificates" section after 7-10 days\n\n'
        "Keep up the great work! 🎓"
    )


def _registration_reply(query_lower: str, profile: UserProfile, context_text: str) -> str:
    registered = profile.registered_events
    attended = profile.attended_events

    if registered:
        listing = "\n".join(
            f"{idx}. **{event.name}** - Status: {event.status.capitalize()}"
            for idx, event in enumerate(registered, start=1)
        )
        opening = (
            f"You are currently registered for **{_plural(len(registered), 'upcoming event')}**: 📅\n\n{listing}"
        )
    else:
        opening = "You are not registered for any upcoming events right now. 📅"

    parts = [opening]
    if attended:
        history = "\n".join(f"• {event.name} ({_format_date(event.date)})" for event in attended)
        parts.append(f"You've attended **{_plural(len(attended), 'event')}** in the past:\n{history}")
    parts.append(f"Your attendance rate is **{profile.attendance_percent}%**. 🌟")
    parts.append('To view more details or cancel a registration, go to "My Registrations" in your profile.')
    return "\n\n".join(parts)


def _attendance_reply(query_lower: str, profile: UserProfile, context_text: str) -> str:
    attended = profile.attended_events
    if attended:
        history = "\n".join(
            f"{idx}. {event.name} - {_format_date(event.date)}" for idx, event in enumerate(attended, start=1)
        )
    else:
        history = "No attended events recorded yet."
    return (
        "Here's your participation record! 📊\n\n"
        f"**Attendance Rate**: {profile.attendance_percent}% ✅\n\n"
        f"**Recently Attended Events**:\n{history}\n\n"
        f"**Total Events Participated**: {profile.events_participated}\n\n"
        "Remember:\n"
        "• Scan QR codes when you arrive at events\n"
        "• 80%+ attendance required for certificates\n"
        "• Consistent attendance improves your priority for future events"
    )


def _summary_reply(query_lower: str, profile: UserProfile, context_text: str) -> str:
    return (
        "Here's your participation summary:\n\n"
        f"**Profile**:\n{context_text}\n\n"
        "Need specific information? Try asking:\n"
        '• "How many certificates do I have?"\n'
        '• "Which events am I registered for?"\n'
        '• "What\'s my attendance rate?"\n\n'
        "I'm here to help! 😊"
    )


# ---------------------------------------------------------------------------
# Topic dispatch
# ---------------------------------------------------------------------------


def _mentions(*needles: str) -> Callable[[str], bool]:
    def predicate(query_lower: str) -> bool:
        return any(needle in query_lower for needle in needles)

    return predicate


@dataclass(slots=True, frozen=True)
class ProfileTopic:
    """Dispatch entry pairing a query predicate with its context block and reply."""

    name: str
    matches: Callable[[str], bool]
    context_block: Callable[[UserProfile], str]
    reply: Callable[[str, UserProfile, str], str]


# Evaluated in order; the first match wins.
PROFILE_TOPICS: tuple[ProfileTopic, ...] = (
    ProfileTopic("certificates", _mentions("certificate"), _certificate_block, _certificate_reply),
    ProfileTopic("registrations", _mentions("registered", "registration"), _registration_block, _registration_reply),
    ProfileTopic("attendance", _mentions("attended", "attendance"), _attendance_block, _attendance_reply),
)

SUMMARY_TOPIC = ProfileTopic("summary", lambda query_lower: True, _summary_block, _summary_reply)


def select_topic(query: str, topics: tuple[ProfileTopic, ...] = PROFILE_TOPICS) -> ProfileTopic:
    query_lower = query.lower()
    for topic in topics:
        if topic.matches(query_lower):
            return topic
    return SUMMARY_TOPIC


def format_profile_context(query: str, profile: UserProfile) -> str:
    """Render the profile fields relevant to the query's sub-topic as plain text."""
    return select_topic(query).context_block(profile)


def generate_personal_answer(query: str, profile: UserProfile, context_text: str = "") -> str:
    """Answer a question about the user's own certificates, registrations or attendance.

    Args:
        query: Raw user query; its sub-topic selects the template.
        profile: Profile to interpolate.
        context_text: Pre-rendered profile block, embedded by the summary reply.

    Returns:
        Reply text with markdown-style emphasis.
    """
    topic = select_topic(query)
    if not context_text:
        context_text = topic.context_block(profile)
    return topic.reply(query.lower(), profile, context_text)
