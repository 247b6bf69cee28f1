import os
from unittest.mock import patch

import pytest

from coachlist.api.settings import (
    DBSettings,
    FirestoreSettings,
    ServerSettings,
    WaitlistStoreSettings,
    verify_env_vars,
)


def test_db_url_must_be_defined() -> None:
    with (
        pytest.raises(ValueError, match="DB_URL must be defined"),
        patch.dict(os.environ, {}, clear=True),
    ):
        DBSettings()


def test_server_settings_have_defaults() -> None:
    with patch.dict(os.environ, {}, clear=True):
        settings = ServerSettings()

    assert settings.host == "0.0.0.0"  # noqa: S104
    assert settings.port == 8000


def test_port_must_be_an_integer() -> None:
    with (
        pytest.raises(ValueError, match="COACHLIST_PORT must be an integer"),
        patch.dict(os.environ, {"COACHLIST_PORT": "not an int"}, clear=True),
    ):
        ServerSettings()


def test_waitlist_store_must_be_valid() -> None:
    is_store_valid = {
        "sqlite": True,
        "firestore": True,
        " Firestore ": True,
        "": False,
        "postgres": False,
    }

    for store, is_valid in is_store_valid.items():
        with patch.dict(os.environ, {"WAITLIST_STORE": store}, clear=True):
            if is_valid:
                assert WaitlistStoreSettings().store == store.strip().lower()

            else:
                with pytest.raises(ValueError, match="must be one of"):
                    WaitlistStoreSettings()


def test_waitlist_store_defaults_to_sqlite() -> None:
    with patch.dict(os.environ, {}, clear=True):
        assert WaitlistStoreSettings().store == "sqlite"


def test_firestore_project_id_must_be_defined() -> None:
    with (
        pytest.raises(ValueError, match="FIRESTORE_PROJECT_ID must be defined"),
        patch.dict(os.environ, {}, clear=True),
    ):
        FirestoreSettings()


def test_firestore_settings_defaults() -> None:
    env = {"FIRESTORE_PROJECT_ID": "coachlist"}

    with patch.dict(os.environ, env, clear=True):
        settings = FirestoreSettings()

    assert settings.collection == "waitlist"
    assert settings.timeout == 10
    assert not settings.api_key
    assert settings.database_url == (
        "https://firestore.googleapis.com/v1/projects/coachlist/databases/(default)"
    )


def test_firestore_timeout_must_be_a_positive_number() -> None:
    for timeout, msg in (("abc", "must be a number"), ("0", "must be positive")):
        env = {
            "FIRESTORE_PROJECT_ID": "coachlist",
            "FIRESTORE_TIMEOUT_SECONDS": timeout,
        }

        with (
            pytest.raises(ValueError, match=msg),
            patch.dict(os.environ, env, clear=True),
        ):
            FirestoreSettings()


def test_verify_env_vars_only_checks_configured_store() -> None:
    with patch.dict(os.environ, {"DB_URL": "db.db3"}, clear=True):
        verify_env_vars()

    env = {"WAITLIST_STORE": "firestore", "FIRESTORE_PROJECT_ID": "coachlist"}

    with patch.dict(os.environ, env, clear=True):
        verify_env_vars()

    with (
        pytest.raises(ValueError, match="FIRESTORE_PROJECT_ID"),
        patch.dict(os.environ, {"WAITLIST_STORE": "firestore"}, clear=True),
    ):
        verify_env_vars()
