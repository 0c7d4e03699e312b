"""HTTP endpoints end to end over an in-memory SQLite database."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import select

from account_server.db.models import Transaction as TransactionModel
from account_server.modules.accounts import AccountService


@pytest.fixture
async def account_number(session_factory):
    async with session_factory() as session:
        service = AccountService.with_session(session)
        user = await service.create_account_user("Pobi")
        result = await service.create_account(user.id, 10000)
        await session.commit()
    return result.account_number


async def _records(session_factory):
    async with session_factory() as session:
        result = await session.execute(select(TransactionModel).order_by(TransactionModel.id))
        return result.scalars().all()


async def _balance(client, user_id=1):
    response = await client.get("/account", params={"user_id": user_id})
    assert response.status_code == 200
    return response.json()[0]["balance"]


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_open_and_list_accounts(client, account_number):
    response = await client.post("/account", json={"user_id": 1, "initial_balance": 500})

    assert response.status_code == 201
    assert response.json()["account_number"] == "1000000001"

    listed = await client.get("/account", params={"user_id": 1})
    assert [item["account_number"] for item in listed.json()] == [account_number, "1000000001"]


async def test_open_account_for_unknown_user(client):
    response = await client.post("/account", json={"user_id": 7, "initial_balance": 500})

    assert response.status_code == 400
    assert response.json()["error_code"] == "USER_NOT_FOUND"


async def test_use_then_query_then_cancel(client, account_number, session_factory):
    used = await client.post(
        "/transaction/use", json={"user_id": 1, "account_number": account_number, "amount": 200}
    )
    assert used.status_code == 200
    body = used.json()
    assert body["transaction_type"] == "USE"
    assert body["transaction_result"] == "S"
    assert body["amount"] == 200
    assert body["balance_snapshot"] == 9800
    assert await _balance(client) == 9800

    queried = await client.get(f"/transaction/{body['transaction_id']}")
    assert queried.status_code == 200
    assert queried.json()["balance_snapshot"] == 9800

    cancelled = await client.post(
        "/transaction/cancel",
        json={"transaction_id": body["transaction_id"], "account_number": account_number, "amount": 200},
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["transaction_type"] == "CANCEL"
    assert cancelled.json()["balance_snapshot"] == 10000
    assert await _balance(client) == 10000

    records = await _records(session_factory)
    assert [(r.transaction_type, r.transaction_result_type) for r in records] == [("USE", "S"), ("CANCEL", "S")]


async def test_rejected_use_is_recorded_as_failure(client, account_number, session_factory):
    response = await client.post(
        "/transaction/use", json={"user_id": 1, "account_number": account_number, "amount": 20000}
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "AMOUNT_EXCEED_BALANCE"
    assert await _balance(client) == 10000

    records = await _records(session_factory)
    assert len(records) == 1
    assert records[0].transaction_type == "USE"
    assert records[0].transaction_result_type == "F"
    assert records[0].amount == 20000
    assert records[0].balance_snapshot == 10000


async def test_partial_cancel_is_recorded_as_failure(client, account_number, session_factory):
    used = await client.post(
        "/transaction/use", json={"user_id": 1, "account_number": account_number, "amount": 200}
    )
    transaction_id = used.json()["transaction_id"]

    response = await client.post(
        "/transaction/cancel",
        json={"transaction_id": transaction_id, "account_number": account_number, "amount": 100},
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "CANCEL_MUST_FULLY"
    assert await _balance(client) == 9800

    records = await _records(session_factory)
    assert [(r.transaction_type, r.transaction_result_type, r.balance_snapshot) for r in records] == [
        ("USE", "S", 9800),
        ("CANCEL", "F", 9800),
    ]


async def test_unknown_account_leaves_no_record(client, account_number, session_factory):
    response = await client.post(
        "/transaction/use", json={"user_id": 1, "account_number": "9999999999", "amount": 200}
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "ACCOUNT_NOT_FOUND"
    assert await _records(session_factory) == []


async def test_negative_amount_is_invalid_request(client, account_number, session_factory):
    response = await client.post(
        "/transaction/cancel",
        json={"transaction_id": "t1", "account_number": account_number, "amount": -200},
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "INVALID_REQUEST"
    assert await _records(session_factory) == []


async def test_query_unknown_transaction(client):
    response = await client.get("/transaction/doesnotexist")

    assert response.status_code == 400
    assert response.json() == {
        "error_code": "TRANSACTION_NOT_FOUND",
        "error_message": "Transaction not found.",
    }


async def test_unknown_user_leaves_no_record(client, account_number, session_factory):
    response = await client.post(
        "/transaction/use", json={"user_id": 99, "account_number": account_number, "amount": 200}
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "USER_NOT_FOUND"
    assert await _records(session_factory) == []


async def test_unknown_transaction_leaves_no_record(client, account_number, session_factory):
    response = await client.post(
        "/transaction/cancel",
        json={"transaction_id": "nope", "account_number": account_number, "amount": 200},
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "TRANSACTION_NOT_FOUND"
    assert await _records(session_factory) == []


async def test_use_on_someone_elses_account_is_recorded(client, account_number, session_factory):
    async with session_factory() as session:
        harry = await AccountService.with_session(session).create_account_user("Harry")
        await session.commit()

    response = await client.post(
        "/transaction/use", json={"user_id": harry.id, "account_number": account_number, "amount": 200}
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "USER_ACCOUNT_UN_MATCH"
    records = await _records(session_factory)
    assert [(r.transaction_type, r.transaction_result_type, r.balance_snapshot) for r in records] == [
        ("USE", "F", 10000)
    ]


async def test_failed_use_cannot_be_cancelled(client, account_number, session_factory):
    await client.post(
        "/transaction/use", json={"user_id": 1, "account_number": account_number, "amount": 20000}
    )
    failed = (await _records(session_factory))[0]

    response = await client.post(
        "/transaction/cancel",
        json={"transaction_id": failed.transaction_id, "account_number": account_number, "amount": 20000},
    )

    assert response.status_code == 400
    assert response.json()["error_code"] == "TRANSACTION_NOT_CANCELABLE"
    assert await _balance(client) == 10000
    records = await _records(session_factory)
    assert [(r.transaction_type, r.transaction_result_type) for r in records] == [("USE", "F"), ("CANCEL", "F")]


async def test_use_can_be_cancelled_once(client, account_number, session_factory):
    used = await client.post(
        "/transaction/use", json={"user_id": 1, "account_number": account_number, "amount": 200}
    )
    cancel = {"transaction_id": used.json()["transaction_id"], "account_number": account_number, "amount": 200}
    first = await client.post("/transaction/cancel", json=cancel)
    second = await client.post("/transaction/cancel", json=cancel)

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error_code"] == "TRANSACTION_ALREADY_CANCELED"
    assert await _balance(client) == 10000
    records = await _records(session_factory)
    assert [(r.transaction_type, r.transaction_result_type) for r in records] == [
        ("USE", "S"),
        ("CANCEL", "S"),
        ("CANCEL", "F"),
    ]


async def test_queried_timestamp_keeps_utc_offset(client, account_number):
    used = await client.post(
        "/transaction/use", json={"user_id": 1, "account_number": account_number, "amount": 200}
    )

    queried = await client.get(f"/transaction/{used.json()['transaction_id']}")

    transacted_at = datetime.fromisoformat(queried.json()["transacted_at"].replace("Z", "+00:00"))
    assert transacted_at.utcoffset() == timedelta(0)
    assert queried.json()["transacted_at"] == used.json()["transacted_at"]
