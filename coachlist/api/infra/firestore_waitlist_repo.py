"""
Waitlist store backed by Firestore (or anything speaking the Firestore REST
API, such as the Firestore emulator). Documents are stored in a single
collection with an `email` string field and a `createdAt` timestamp which is
set by the server when the document is written.
"""

from typing import Any
from uuid import uuid4

import httpx

from coachlist.api.settings import FirestoreSettings
from coachlist.application.exceptions import StoreUnavailable
from coachlist.domain.datetime import UtcDatetime
from coachlist.domain.repo.waitlist_repo import IWaitlistRepo
from coachlist.domain.waitlist import WaitlistEntry


class FirestoreWaitlistRepo(IWaitlistRepo):
    settings: FirestoreSettings
    client: httpx.AsyncClient

    def __init__(
        self,
        settings: FirestoreSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or FirestoreSettings()

        self.client = client or httpx.AsyncClient(
            timeout=self.settings.timeout
        )

    async def get_entries_by_email(self, email: str) -> list[WaitlistEntry]:
        query = {
            "structuredQuery": {
                "from": [{"collectionId": self.settings.collection}],
                "where": {
                    "fieldFilter": {
                        "field": {"fieldPath": "email"},
                        "op": "EQUAL",
                        "value": {"stringValue": email},
                    }
                },
            }
        }

        data = await self._post("documents:runQuery", query)

        if not isinstance(data, list):
            raise StoreUnavailable("Unexpected query response")

        return [
            self._document_to_entry(email, result["document"])
            for result in data
            if isinstance(result, dict) and "document" in result
        ]

    async def insert_entry(self, email: str) -> WaitlistEntry:
        name = f"{self._documents_path}/{self.settings.collection}/{uuid4().hex}"

        commit = {
            "writes": [
                {
                    "update": {
                        "name": name,
                        "fields": {"email": {"stringValue": email}},
                    },
                    "updateTransforms": [
                        {
                            "fieldPath": "createdAt",
                            "setToServerValue": "REQUEST_TIME",
                        }
                    ],
                    "currentDocument": {"exists": False},
                }
            ]
        }

        data = await self._post("documents:commit", commit)

        try:
            [write_result] = data["writeResults"]
            [created_at] = write_result["transformResults"]

            return WaitlistEntry(
                email=email,
                created_at=UtcDatetime.fromisoformat(
                    created_at["timestampValue"]
                ),
            )

        except (KeyError, TypeError, ValueError) as ex:
            raise StoreUnavailable("Unexpected commit response") from ex

    @property
    def _documents_path(self) -> str:
        return (
            f"projects/{self.settings.project_id}/databases/(default)/documents"
        )

    async def _post(self, method: str, body: dict[str, Any]) -> Any:  # type: ignore[misc]
        url = f"{self.settings.database_url}/{method}"
        params = {"key": self.settings.api_key} if self.settings.api_key else {}

        try:
            resp = await self.client.post(url, params=params, json=body)
            resp.raise_for_status()

            return resp.json()

        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as ex:
            raise StoreUnavailable(f"Firestore request failed: {ex}") from ex

        except ValueError as ex:
            raise StoreUnavailable("Firestore returned invalid JSON") from ex

    @staticmethod
    def _document_to_entry(email: str, document: Any) -> WaitlistEntry:  # type: ignore[misc]
        # The document matched the query, so it is on the waitlist no matter
        # what else it contains. Documents written by hand (or by an older
        # version of the landing page) might be missing `createdAt`.
        try:
            timestamp = document["fields"]["createdAt"]["timestampValue"]
            created_at = UtcDatetime.fromisoformat(timestamp)

        except (KeyError, TypeError, ValueError):
            created_at = None

        return WaitlistEntry(email=email, created_at=created_at)
