#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from freezegun import freeze_time

from smithy_aws_clients.exceptions import SmithyIdentityError
from smithy_aws_clients.identity import (
    AWSCredentialsIdentity,
    ChainedIdentityResolver,
    EnvironmentCredentialsResolver,
    StaticCredentialsResolver,
    create_default_chain,
)


def test_expiration_is_normalized_to_utc() -> None:
    identity = AWSCredentialsIdentity(
        access_key_id="AKID",
        secret_access_key="SECRET",
        expiration=datetime(2024, 1, 1, 2, tzinfo=timezone(timedelta(hours=2))),
    )
    assert identity.expiration == datetime(2024, 1, 1, tzinfo=UTC)


def test_is_expired() -> None:
    identity = AWSCredentialsIdentity(
        access_key_id="AKID",
        secret_access_key="SECRET",
        expiration=datetime(2024, 1, 1, tzinfo=UTC),
    )
    with freeze_time("2023-12-31T23:59:59Z"):
        assert not identity.is_expired
    with freeze_time("2024-01-01T00:00:00Z"):
        assert identity.is_expired


def test_repr_hides_secret() -> None:
    identity = AWSCredentialsIdentity(access_key_id="AKID", secret_access_key="SECRET")
    assert "SECRET" not in repr(identity)


async def test_static_resolver() -> None:
    identity = await StaticCredentialsResolver().get_identity(
        properties={
            "access_key_id": "AKID",
            "secret_access_key": "SECRET",
            "session_token": "TOKEN",
        }
    )
    assert identity.access_key_id == "AKID"
    assert identity.secret_access_key == "SECRET"
    assert identity.session_token == "TOKEN"


@pytest.mark.parametrize(
    "properties",
    [{}, {"access_key_id": "AKID"}, {"access_key_id": None, "secret_access_key": "S"}],
)
async def test_static_resolver_requires_both_keys(properties: dict[str, str]) -> None:
    with pytest.raises(SmithyIdentityError):
        await StaticCredentialsResolver().get_identity(properties=properties)  # type: ignore[arg-type]


async def test_environment_resolver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKID")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "SECRET")

    identity = await EnvironmentCredentialsResolver().get_identity(properties={})

    assert identity.access_key_id == "AKID"
    assert identity.session_token is None


async def test_environment_resolver_missing_values() -> None:
    with pytest.raises(SmithyIdentityError):
        await EnvironmentCredentialsResolver().get_identity(properties={})


async def test_chain_falls_through_to_next_resolver() -> None:
    expected = AWSCredentialsIdentity(access_key_id="AKID", secret_access_key="SECRET")
    failing = AsyncMock()
    failing.get_identity.side_effect = SmithyIdentityError("nope")
    succeeding = AsyncMock()
    succeeding.get_identity.return_value = expected

    chain = ChainedIdentityResolver([failing, succeeding])

    assert await chain.get_identity(properties={}) is expected
    assert await chain.get_identity(properties={}) is expected
    succeeding.get_identity.assert_awaited_once()


async def test_chain_raises_when_every_resolver_fails() -> None:
    failing = AsyncMock()
    failing.get_identity.side_effect = SmithyIdentityError("nope")

    with pytest.raises(SmithyIdentityError):
        await ChainedIdentityResolver([failing]).get_identity(properties={})


async def test_chain_does_not_swallow_other_errors() -> None:
    broken = AsyncMock()
    broken.get_identity.side_effect = ValueError("boom")

    with pytest.raises(ValueError):
        await ChainedIdentityResolver([broken]).get_identity(properties={})


async def test_default_chain_prefers_config_values(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ENV_AKID")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "ENV_SECRET")

    from_config = await create_default_chain().get_identity(
        properties={"access_key_id": "AKID", "secret_access_key": "SECRET"}
    )
    from_env = await create_default_chain().get_identity(properties={})

    assert from_config.access_key_id == "AKID"
    assert from_env.access_key_id == "ENV_AKID"
