"""Tests for personal.py: profile context blocks and personal reply templates."""
from __future__ import annotations

from support_rag.personal import format_profile_context, generate_personal_answer, select_topic
from support_rag.schema import Certificate, UserProfile


# ---------------------------------------------------------------------------
# select_topic
# ---------------------------------------------------------------------------

class TestSelectTopic:
    def test_certificates(self):
        assert select_topic("how many certificates do I have").name == "certificates"

    def test_registrations(self):
        assert select_topic("which events am I registered for").name == "registrations"

    def test_attendance(self):
        assert select_topic("what is my attendance").name == "attendance"

    def test_certificate_checked_before_registration(self):
        assert select_topic("certificate for my registration").name == "certificates"

    def test_summary_fallback(self):
        assert select_topic("tell me about my profile").name == "summary"


# ---------------------------------------------------------------------------
# format_profile_context
# ---------------------------------------------------------------------------

class TestFormatProfileContext:
    def test_certificate_block(self, sample_profile):
        text = format_profile_context("my certificates", sample_profile)
        assert text.splitlines() == [
            "User: Rahul Sharma",
            "Total Certificates Earned: 2",
            "Certificates:",
            "- Python Workshop (Issued: 2026-02-15)",
            "- Git & GitHub Session (Issued: 2026-02-01)",
            'You can download your certificates from the "My Certificates" section.',
        ]

    def test_registration_block(self, sample_profile):
        text = format_profile_context("my registrations", sample_profile)
        assert "- React Fundamentals Workshop (upcoming)" in text
        assert "Total Events Attended: 2" in text

    def test_attendance_block(self, sample_profile):
        text = format_profile_context("my attendance", sample_profile)
        assert "Attendance Rate: 85%" in text
        assert "- Python Workshop (2026-02-10)" in text

    def test_summary_block(self, sample_profile):
        text = format_profile_context("about me", sample_profile)
        assert "Department: Computer Science, Year 3" in text
        assert "Total Events Participated: 4" in text
        assert "Total Certificates: 2" in text

    def test_summary_block_without_department(self):
        text = format_profile_context("about me", UserProfile(name="Sam"))
        assert "Department" not in text
        assert text.startswith("User: Sam")


# ---------------------------------------------------------------------------
# generate_personal_answer
# ---------------------------------------------------------------------------

class TestCertificateAnswers:
    def test_count_first(self, two_certificate_profile):
        text = generate_personal_answer("how many certificates do I have", two_certificate_profile)
        assert "**2 certificates**" in text
        assert "1. **Robotics Meetup** - Issued on January 20, 2026" in text
        assert "2. **Design Sprint** - Issued on December 5, 2025" in text

    def test_total_uses_count_first_layout(self, two_certificate_profile):
        text = generate_personal_answer("total certificates", two_certificate_profile)
        assert text.startswith("Based on your profile, you have earned **2 certificates**")

    def test_where_to_download(self, two_certificate_profile):
        text = generate_personal_answer("where can I download my certificate", two_certificate_profile)
        assert '2. Navigate to "My Certificates"' in text
        assert "• Robotics Meetup" in text
        assert "• Design Sprint" in text

    def test_default_listing(self, two_certificate_profile):
        text = generate_personal_answer("show my certificates", two_certificate_profile)
        assert text.startswith("You have **2 certificates** in your account:")
        assert "1. Robotics Meetup (Issued: January 20, 2026)" in text
        assert "To earn more certificates:" in text

    def test_singular(self):
        profile = UserProfile(certificates=(Certificate(event_name="Solo Talk", issued_date="2026-03-01"),))
        text = generate_personal_answer("how many certificates", profile)
        assert "**1 certificate**" in text

    def test_no_certificates(self):
        text = generate_personal_answer("how many certificates do I have", UserProfile(name="New"))
        assert text.startswith("You haven't earned any certificates yet.")

    def test_non_iso_date_passes_through(self):
        profile = UserProfile(certificates=(Certificate(event_name="Old Event", issued_date="last spring"),))
        text = generate_personal_answer("how many certificates", profile)
        assert "Issued on last spring" in text


class TestRegistrationAnswer:
    def test_lists_registrations_and_history(self, sample_profile):
        text = generate_personal_answer("which events am I registered for", sample_profile)
        assert "**2 upcoming events**" in text
        assert "1. **React Fundamentals Workshop** - Status: Upcoming" in text
        assert "• Python Workshop (February 10, 2026)" in text
        assert "Your attendance rate is **85%**" in text

    def test_no_registrations(self):
        text = generate_personal_answer("my registrations", UserProfile())
        assert text.startswith("You are not registered for any upcoming events right now.")
        assert "attended" not in text


class TestAttendanceAnswer:
    def test_record(self, sample_profile):
        text = generate_personal_answer("what is my attendance", sample_profile)
        assert "**Attendance Rate**: 85%" in text
        assert "1. Python Workshop - February 10, 2026" in text
        assert "**Total Events Participated**: 4" in text

    def test_empty_history(self):
        text = generate_personal_answer("my attendance", UserProfile())
        assert "No attended events recorded yet." in text


class TestSummaryAnswer:
    def test_embeds_given_context(self, sample_profile):
        text = generate_personal_answer("tell me about my profile", sample_profile, context_text="CTX")
        assert "**Profile**:\nCTX" in text
        assert '"How many certificates do I have?"' in text

    def test_builds_context_when_missing(self, sample_profile):
        text = generate_personal_answer("tell me about my profile", sample_profile)
        assert "User: Rahul Sharma" in text
