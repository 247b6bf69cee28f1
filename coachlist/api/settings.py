import os
from contextlib import suppress
from typing import ClassVar

with suppress(ModuleNotFoundError):
    from dotenv import load_dotenv

    load_dotenv()


class DBSettings:
    db_url: str

    def __init__(self) -> None:
        self.db_url = os.getenv("DB_URL", "")

        if not self.db_url:
            raise ValueError("DB_URL must be defined")


class ServerSettings:
    host: str
    port: int

    def __init__(self) -> None:
        self.host = os.getenv("COACHLIST_HOST", "0.0.0.0")  # noqa: S104

        if not self.host:
            raise ValueError("COACHLIST_HOST must be defined")

        try:
            self.port = int(os.getenv("COACHLIST_PORT", "8000"))

        except ValueError as ex:
            raise ValueError("COACHLIST_PORT must be an integer") from ex

        if not self.port:
            raise ValueError("COACHLIST_PORT must be defined")


class WaitlistStoreSettings:
    store: str

    AVAILABLE_STORES: ClassVar[set[str]] = {"sqlite", "firestore"}

    def __init__(self) -> None:
        self.store = os.getenv("WAITLIST_STORE", "sqlite").strip().lower()

        if self.store not in self.AVAILABLE_STORES:
            stores = ", ".join(f'"{x}"' for x in sorted(self.AVAILABLE_STORES))

            raise ValueError(f"WAITLIST_STORE must be one of: {stores}")


Seconds = float


class FirestoreSettings:
    project_id: str
    api_key: str
    base_url: str
    collection: str
    timeout: Seconds

    DEFAULT_BASE_URL: ClassVar[str] = "https://firestore.googleapis.com/v1"

    def __init__(self) -> None:
        self.project_id = os.getenv("FIRESTORE_PROJECT_ID", "")

        if not self.project_id:
            raise ValueError("FIRESTORE_PROJECT_ID must be defined")

        self.api_key = os.getenv("FIRESTORE_API_KEY", "")

        self.base_url = os.getenv(
            "FIRESTORE_BASE_URL", self.DEFAULT_BASE_URL
        ).rstrip("/")

        if not self.base_url:
            raise ValueError("FIRESTORE_BASE_URL must be defined")

        self.collection = os.getenv("FIRESTORE_COLLECTION", "waitlist")

        if not self.collection:
            raise ValueError("FIRESTORE_COLLECTION must be defined")

        try:
            self.timeout = float(os.getenv("FIRESTORE_TIMEOUT_SECONDS", "10"))

        except ValueError as ex:
            raise ValueError(
                "FIRESTORE_TIMEOUT_SECONDS must be a number"
            ) from ex

        if self.timeout <= 0:
            raise ValueError("FIRESTORE_TIMEOUT_SECONDS must be positive")

    @property
    def database_url(self) -> str:
        return f"{self.base_url}/projects/{self.project_id}/databases/(default)"


def verify_env_vars() -> None:
    """
    Eagerly load env vars to see if they are valid. Only the settings for the
    configured waitlist store are checked.
    """

    ServerSettings()

    if WaitlistStoreSettings().store == "firestore":
        FirestoreSettings()

    else:
        DBSettings()
