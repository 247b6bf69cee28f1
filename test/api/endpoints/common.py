from fastapi import FastAPI
from fastapi.testclient import TestClient

from coachlist.api.di import DiContainer
from coachlist.api.infra.waitlist_repo import WaitlistRepo
from coachlist.domain.repo.waitlist_repo import IWaitlistRepo
from test.api.common import SqliteTestWrapper


class TestDiContainer(SqliteTestWrapper, DiContainer):
    @classmethod
    def waitlist_repo(cls) -> IWaitlistRepo:
        cls._setup()

        return WaitlistRepo(cls.connection)


class TestEndpointWrapper:
    app: FastAPI
    client: TestClient
    di: TestDiContainer

    @classmethod
    def setup_class(cls) -> None:
        if not hasattr(cls, "app"):
            cls.app = FastAPI()

        cls.di = TestDiContainer()
        cls.di.reset()
        cls.app.dependency_overrides[DiContainer] = lambda: cls.di

        cls.client = TestClient(cls.app)

    def setup_method(self) -> None:
        self.di.reset()
