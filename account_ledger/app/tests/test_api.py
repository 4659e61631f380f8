from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from ..core import db
from ..core.db import get_session
from ..main import app

@pytest.fixture
def client(engine, monkeypatch) -> TestClient:
    # the lifespan's init_db runs against the shared in-memory ledger
    monkeypatch.setattr(db, "engine", engine)

    def _get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _open(client: TestClient, account_number: int, balance: str = "0", currency: str = "USD") -> None:
    response = client.post(
        "/accounts",
        json={
            "account_number": account_number,
            "currency": currency,
            "opening_balance": balance,
        },
    )
    assert response.status_code == 201


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok", "default_currency": "USD"}


def test_open_account_uses_default_currency(client: TestClient) -> None:
    response = client.post("/accounts", json={"account_number": 7007})
    assert response.status_code == 201
    body = response.json()
    assert body["balance"]["currency"] == "USD"
    assert Decimal(body["balance"]["amount"]) == Decimal("0")

    duplicate = client.post("/accounts", json={"account_number": 7007})
    assert duplicate.status_code == 409


def test_deposit_then_withdraw(client: TestClient) -> None:
    _open(client, 1001, "100")

    deposit = client.post("/accounts/1001/deposit", json={"amount": "50", "description": "paycheck"})
    assert deposit.status_code == 200
    body = deposit.json()
    assert Decimal(body["balance"]["amount"]) == Decimal("150")
    assert Decimal(body["current_balance"]["amount"]) == Decimal("100")
    assert body["transaction_type"] == "Deposit"
    assert body["description"] == "paycheck"

    withdraw = client.post("/accounts/1001/withdraw", json={"amount": "40"})
    assert withdraw.status_code == 200
    assert Decimal(withdraw.json()["balance"]["amount"]) == Decimal("110")
    assert withdraw.json()["transaction_type"] == "Withdrawal"

    balance = client.get("/accounts/1001/balance")
    assert balance.status_code == 200
    assert Decimal(balance.json()["balance"]["amount"]) == Decimal("110")


def test_withdraw_insufficient_funds(client: TestClient) -> None:
    _open(client, 1001, "150")

    response = client.post("/accounts/1001/withdraw", json={"amount": "200"})
    assert response.status_code == 409

    balance = client.get("/accounts/1001/balance")
    assert Decimal(balance.json()["balance"]["amount"]) == Decimal("150")


def test_zero_deposit_is_rejected(client: TestClient) -> None:
    _open(client, 1001, "100")

    response = client.post("/accounts/1001/deposit", json={"amount": "0"})
    assert response.status_code == 400
    assert "positive" in response.json()["detail"]


def test_unknown_account_returns_404(client: TestClient) -> None:
    response = client.get("/accounts/9999/balance")
    assert response.status_code == 404
    assert response.json()["detail"] == "Account 9999 not found"


def test_statement_lists_entries_in_account_currency(client: TestClient) -> None:
    _open(client, 3003, "10", currency="EUR")
    for amount in ("1", "2", "3"):
        client.post("/accounts/3003/deposit", json={"amount": amount})

    response = client.get(
        "/accounts/3003/statement",
        params={"start_date": "2000-01-01T00:00:00", "end_date": "2999-01-01T00:00:00"},
    )
    assert response.status_code == 200
    statement = response.json()
    assert statement["currency"] == "EUR"
    items = statement["transaction_details"]
    assert [Decimal(item["amount"]["amount"]) for item in items] == [
        Decimal("1"),
        Decimal("2"),
        Decimal("3"),
    ]
    assert {item["amount"]["currency"] for item in items} == {"EUR"}
    assert [Decimal(item["current_balance"]["amount"]) for item in items] == [
        Decimal("10"),
        Decimal("11"),
        Decimal("13"),
    ]


def test_statement_rejects_inverted_range(client: TestClient) -> None:
    _open(client, 3003)

    response = client.get(
        "/accounts/3003/statement",
        params={"start_date": "2024-02-01T00:00:00", "end_date": "2024-01-01T00:00:00"},
    )
    assert response.status_code == 400


def test_deposit_with_too_many_decimal_places_is_rejected(client: TestClient) -> None:
    _open(client, 1001, "100")

    response = client.post("/accounts/1001/deposit", json={"amount": "0.00001"})
    assert response.status_code == 422

    balance = client.get("/accounts/1001/balance")
    assert Decimal(balance.json()["balance"]["amount"]) == Decimal("100")


def test_large_deposit_keeps_every_digit(client: TestClient) -> None:
    _open(client, 1001, "100")

    response = client.post("/accounts/1001/deposit", json={"amount": "12345678901234.5678"})
    assert response.status_code == 200
    assert Decimal(response.json()["balance"]["amount"]) == Decimal("12345678901334.5678")

    too_large = client.post("/accounts/1001/deposit", json={"amount": "100000000000000"})
    assert too_large.status_code == 422


def test_statement_accepts_mixed_naive_and_aware_bounds(client: TestClient) -> None:
    _open(client, 3003)

    response = client.get(
        "/accounts/3003/statement",
        params={"start_date": "2024-01-01T00:00:00Z", "end_date": "2024-02-01T00:00:00"},
    )
    assert response.status_code == 200
    assert response.json()["transaction_details"] == []


def test_statement_honours_utc_offsets(client: TestClient) -> None:
    _open(client, 3003)
    client.post("/accounts/3003/deposit", json={"amount": "5"})
    now = datetime.now(UTC)
    plus_five = timezone(timedelta(hours=5))
    minus_two = timezone(timedelta(hours=-2))

    # covers now, although the local wall-clock times are hours ahead
    covering = client.get(
        "/accounts/3003/statement",
        params={
            "start_date": (now - timedelta(hours=1)).astimezone(plus_five).isoformat(),
            "end_date": (now + timedelta(hours=1)).astimezone(plus_five).isoformat(),
        },
    )
    # starts an hour from now, although the local wall-clock times bracket now
    later = client.get(
        "/accounts/3003/statement",
        params={
            "start_date": (now + timedelta(hours=1)).astimezone(minus_two).isoformat(),
            "end_date": (now + timedelta(hours=3)).astimezone(minus_two).isoformat(),
        },
    )

    assert covering.status_code == 200
    assert [Decimal(item["amount"]["amount"]) for item in covering.json()["transaction_details"]] == [
        Decimal("5")
    ]
    assert later.status_code == 200
    assert later.json()["transaction_details"] == []
