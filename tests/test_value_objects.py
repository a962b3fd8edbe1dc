"""Domain value objects and helpers"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from app.core.security import create_session_token, decode_session_token, hash_reset_token
from app.domain.entities.password_reset_token import PasswordResetToken
from app.domain.services.slug import generate_slug, slugify
from app.domain.value_objects.email import Email
from app.domain.value_objects.entity_ids import UserId
from app.domain.value_objects.money import Money
from app.domain.value_objects.username import Username


@pytest.mark.parametrize("amount, expected", [
    (5000, "$5,000"),
    (Decimal("1250.5"), "$1,250.50"),
    (19.99, "$19.99"),
    ("1000000", "$1,000,000"),
])
def test_money_formatting(amount, expected):
    assert Money.of(amount).formatted() == expected


def test_money_must_be_positive():
    with pytest.raises(ValueError):
        Money.of(0)


def test_username_rules():
    assert Username("Alice_99").value == "alice_99"
    for bad in ("ab", "a" * 21, "has space", "emoji😀", "trailing\n"):
        with pytest.raises(ValueError):
            Username(bad)


def test_email_is_normalized():
    assert Email("  Alice@Example.COM ").value == "alice@example.com"
    with pytest.raises(ValueError):
        Email("nope")


def test_slugify():
    assert slugify("Acme Shop | Acme Inc!") == "acme-shop-acme-inc"
    assert slugify("Café Übersicht") == "cafe-ubersicht"
    assert slugify("!!!") == "listing"


def test_generate_slug_adds_suffix():
    slug = generate_slug("Acme Shop")
    assert slug.startswith("acme-shop-")
    assert len(slug) == len("acme-shop-") + 6


def test_session_token_carries_only_the_session_id():
    token = create_session_token("abc123", datetime.utcnow() + timedelta(minutes=5))
    assert decode_session_token(token) == "abc123"
    assert decode_session_token(token + "x") is None
    assert decode_session_token("garbage") is None


def test_expired_session_token_is_rejected():
    token = create_session_token("abc123", datetime.utcnow() - timedelta(minutes=5))
    assert decode_session_token(token) is None


def test_reset_token_single_use():
    token = PasswordResetToken.issue(UserId(1), hash_reset_token("raw"), timedelta(hours=1))
    assert token.is_valid()
    token.mark_used()
    assert not token.is_valid()
    with pytest.raises(ValueError):
        token.mark_used()
