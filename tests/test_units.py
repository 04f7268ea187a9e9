# tests/test_units.py
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.requests import Request

from educenter import rate_limiter
from educenter.models import UserRole
from educenter.rate_limiter import check_rate_limit, client_ip, reset_rate_limits
from educenter.security_utils import hash_password_bcrypt, verify_password_bcrypt
from educenter.shared.router import parse_filter_value
from educenter.shared.service import describe_error
from educenter.shared.validators import reject_null, validate_date_range, validate_email
from run_migration import split_statements
from seed_data import DEFAULT_ROLES, seed_roles


class TestValidators:
    def test_email_is_normalized(self):
        assert validate_email("  Someone@Example.COM ") == "someone@example.com"

    def test_empty_email_passes_through(self):
        assert validate_email(None) is None

    @pytest.mark.parametrize("email", ["plain", "a@b", "@example.com", "a b@example.com"])
    def test_malformed_email_is_rejected(self, email):
        with pytest.raises(ValueError):
            validate_email(email)

    def test_date_range_accepts_open_ends(self):
        validate_date_range(None, datetime(2024, 1, 1))
        validate_date_range(datetime(2024, 1, 1), None)
        validate_date_range(datetime(2024, 1, 1), datetime(2024, 1, 1))

    def test_date_range_rejects_reversed_range(self):
        with pytest.raises(ValueError, match="enrollment period"):
            validate_date_range(datetime(2024, 2, 1), datetime(2024, 1, 1), "enrollment period")

    def test_date_range_compares_mixed_timezones(self):
        with pytest.raises(ValueError):
            validate_date_range(
                datetime(2024, 2, 1, tzinfo=timezone.utc), datetime(2024, 1, 1)
            )

    def test_reject_null(self):
        assert reject_null(0) == 0
        assert reject_null(False) is False
        with pytest.raises(ValueError):
            reject_null(None)


class TestFilterParsing:
    def test_integers(self):
        assert parse_filter_value("42", int) == 42

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("No", False), ("FALSE", False)])
    def test_booleans(self, raw, expected):
        assert parse_filter_value(raw, bool) is expected

    @pytest.mark.parametrize("raw,python_type", [("abc", int), ("maybe", bool), ("x", float)])
    def test_bad_values_raise(self, raw, python_type):
        with pytest.raises(ValueError):
            parse_filter_value(raw, python_type)


class TestRateLimiter:
    def setup_method(self):
        reset_rate_limits()

    def teardown_method(self):
        reset_rate_limits()

    def test_allows_up_to_limit_then_blocks(self):
        results = [check_rate_limit("unit:a", limit=3, window_seconds=60) for _ in range(4)]

        assert [allowed for allowed, _, _ in results] == [True, True, True, False]
        assert results[-1][1] == 3
        assert 0 < results[-1][2] <= 60

    def test_keys_are_counted_separately(self):
        check_rate_limit("unit:a", limit=1, window_seconds=60)

        allowed, count, _ = check_rate_limit("unit:b", limit=1, window_seconds=60)
        assert allowed
        assert count == 1

    def test_reset_clears_windows(self):
        check_rate_limit("unit:a", limit=1, window_seconds=60)
        reset_rate_limits()

        allowed, _, _ = check_rate_limit("unit:a", limit=1, window_seconds=60)
        assert allowed


class TestClientIp:
    @staticmethod
    def request(peer, forwarded=None):
        headers = [(b"x-forwarded-for", forwarded.encode())] if forwarded else []
        return Request({"type": "http", "headers": headers, "client": (peer, 50000)})

    def test_forwarded_header_ignored_from_untrusted_peer(self, monkeypatch):
        monkeypatch.setattr(rate_limiter, "TRUSTED_PROXIES", set())

        assert client_ip(self.request("198.51.100.9", "10.0.0.1")) == "198.51.100.9"

    def test_trusted_proxy_reports_nearest_untrusted_hop(self, monkeypatch):
        monkeypatch.setattr(rate_limiter, "TRUSTED_PROXIES", {"10.0.0.2", "10.0.0.3"})

        # The client can prepend anything; the hop our proxy appended wins
        request = self.request("10.0.0.3", "1.1.1.1, 203.0.113.7, 10.0.0.2")
        assert client_ip(request) == "203.0.113.7"

    def test_trusted_proxy_without_header_is_the_client(self, monkeypatch):
        monkeypatch.setattr(rate_limiter, "TRUSTED_PROXIES", {"10.0.0.3"})

        assert client_ip(self.request("10.0.0.3")) == "10.0.0.3"


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password_bcrypt("hunter22")

        assert hashed != "hunter22"
        assert verify_password_bcrypt("hunter22", hashed)
        assert not verify_password_bcrypt("hunter23", hashed)

    @pytest.mark.parametrize("stored", [None, "", "not-a-bcrypt-hash"])
    def test_missing_or_malformed_hash_never_matches(self, stored):
        assert not verify_password_bcrypt("anything", stored)


def test_describe_error_prefers_driver_message():
    error = IntegrityError("INSERT INTO x", {}, Exception("UNIQUE constraint failed: users.email"))

    assert describe_error(error) == "UNIQUE constraint failed: users.email"
    assert describe_error(SQLAlchemyError("plain failure")) == "plain failure"


def test_split_statements_drops_comments_and_blanks():
    sql = """
    -- add column
    ALTER TABLE branches ADD COLUMN phone VARCHAR(20);

    ;
    CREATE INDEX ix_branches_phone ON branches (phone);
    """

    assert split_statements(sql) == [
        "ALTER TABLE branches ADD COLUMN phone VARCHAR(20)",
        "CREATE INDEX ix_branches_phone ON branches (phone)",
    ]


def test_seed_roles_is_idempotent(db_session):
    db_session.add(UserRole(role_name="admin"))
    db_session.commit()

    assert seed_roles(db_session) == ["worker", "student"]
    assert seed_roles(db_session) == []
    names = sorted(name for (name,) in db_session.query(UserRole.role_name).all())
    assert names == sorted(DEFAULT_ROLES)
