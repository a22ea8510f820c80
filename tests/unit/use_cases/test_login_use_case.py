from unittest.mock import patch

import pytest

from taskflow.app.use_cases.auth import LoginUseCase
from taskflow.domain.entities import User
from taskflow.libs.result import ErrorKind


@pytest.fixture
def alice(hasher):
    return User(email="alice@example.com", password_hash=hasher.hash("pw123456"), name="Alice")


@pytest.mark.asyncio
async def test_successful_login(mock_uow, hasher, tokens, alice):
    mock_uow.users.get_by_email.return_value = alice

    result = await LoginUseCase(mock_uow, hasher, tokens).execute("alice@example.com", "pw123456")

    assert result.is_ok()
    response = result.value
    assert response.user.id == str(alice.id)
    mock_uow.refresh_tokens.create.assert_awaited_once_with(alice.id, response.refresh_token)
    mock_uow.commit.assert_awaited_once()
    assert tokens.verify_access_token(response.access_token).user_id == str(alice.id)


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_are_indistinguishable(
    mock_uow, hasher, tokens, alice
):
    mock_uow.users.get_by_email.return_value = alice
    wrong_password = await LoginUseCase(mock_uow, hasher, tokens).execute(
        "alice@example.com", "not-the-password"
    )

    mock_uow.users.get_by_email.return_value = None
    unknown_email = await LoginUseCase(mock_uow, hasher, tokens).execute(
        "nobody@example.com", "pw123456"
    )

    assert wrong_password.error == unknown_email.error
    assert wrong_password.error.kind == ErrorKind.unauthorized
    assert wrong_password.error.message == "Invalid email or password"
    mock_uow.refresh_tokens.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_email_still_spends_a_hash_check(mock_uow, hasher, tokens):
    with patch.object(hasher, "burn_time") as burn_time:
        result = await LoginUseCase(mock_uow, hasher, tokens).execute(
            "nobody@example.com", "pw123456"
        )

    assert result.is_err()
    burn_time.assert_called_once()


@pytest.mark.asyncio
async def test_each_login_issues_a_distinct_refresh_token(mock_uow, hasher, tokens, alice):
    mock_uow.users.get_by_email.return_value = alice
    use_case = LoginUseCase(mock_uow, hasher, tokens)

    first = await use_case.execute("alice@example.com", "pw123456")
    second = await use_case.execute("alice@example.com", "pw123456")

    assert first.value.refresh_token != second.value.refresh_token
    assert first.value.access_token != second.value.access_token
