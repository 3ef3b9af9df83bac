"""
Unit tests for timezone-aware timestamps.

Run: pytest tests/unit/test_clock.py -v
"""

from datetime import timedelta

from models.account import AccountProfile
from models.resume import Resume
from utils.clock import utc_now


class TestUtcNow:

    def test_is_timezone_aware_utc(self):
        now = utc_now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_profile_defaults_are_aware(self):
        profile = AccountProfile(account_id=1)
        assert profile.created_at.tzinfo is not None
        assert profile.updated_at.tzinfo is not None

    def test_resume_defaults_are_aware(self):
        resume = Resume(account_id=1, title="T", content="0123456789")
        assert resume.created_at.tzinfo is not None
        assert resume.updated_at.tzinfo is not None
