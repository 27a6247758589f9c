import logging

import pytest
from fastapi.testclient import TestClient

from dojo.app import create_app
from dojo.bootstrap import build_container, resolve_dependencies
from dojo.container import Container
from dojo.interfaces import Warrior, Weapon
from dojo.settings import Settings


def test_fight_returns_katana_action(client: TestClient) -> None:
    response = client.get("/warrior/fight")

    assert response.status_code == 200
    assert response.json() == {"action": "cut!"}


def test_sneak_returns_shuriken_action(client: TestClient) -> None:
    response = client.get("/warrior/sneak")

    assert response.status_code == 200
    assert response.json() == {"action": "hit!"}


def test_repeated_requests_are_stable(client: TestClient) -> None:
    bodies = [client.get("/warrior/fight").json() for _ in range(3)]

    assert bodies == [{"action": "cut!"}] * 3


def test_root_returns_plain_text_greeting(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "base route. Hello World Fellas"


def test_root_greeting_comes_from_settings() -> None:
    container = build_container(Settings(_env_file=None, greeting="Konnichiwa"))
    client = TestClient(create_app(container))

    assert client.get("/").text == "Konnichiwa"


@pytest.mark.parametrize("path", ["/warrior", "/warrior/run", "/missing"])
def test_unknown_routes_return_404(client: TestClient, path: str) -> None:
    assert client.get(path).status_code == 404


def test_post_is_not_allowed(client: TestClient) -> None:
    assert client.post("/warrior/fight").status_code == 405


def test_openapi_does_not_expose_injected_parameters(client: TestClient) -> None:
    operation = client.get("/openapi.json").json()["paths"]["/warrior/fight"]["get"]

    assert "parameters" not in operation


def test_routes_use_rebound_warrior(dojo_container: Container) -> None:
    class Samurai(Warrior):
        def fight(self) -> str:
            return "slash!"

        def sneak(self) -> str:
            return "never"

    dojo_container.add_concrete(Samurai, provides=Warrior)
    client = TestClient(create_app(dojo_container))

    assert client.get("/warrior/fight").json() == {"action": "slash!"}
    assert client.get("/warrior/sneak").json() == {"action": "never"}


def test_create_app_defaults_to_process_container() -> None:
    app = create_app()

    assert app.state.container is resolve_dependencies()
    assert TestClient(app).get("/warrior/fight").json() == {"action": "cut!"}


def test_requests_are_logged(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="dojo.app"):
        client.get("/warrior/sneak")

    assert any("GET /warrior/sneak -> 200" in record.getMessage() for record in caplog.records)


def test_routes_follow_rebound_weapon_after_warrior_was_built(dojo_container: Container) -> None:
    class Bo(Weapon):
        def hit(self) -> str:
            return "thud!"

    client = TestClient(create_app(dojo_container))
    assert client.get("/warrior/fight").json() == {"action": "cut!"}

    dojo_container.add_concrete(Bo, provides=Weapon)

    assert client.get("/warrior/fight").json() == {"action": "thud!"}
    assert client.get("/warrior/sneak").json() == {"action": "hit!"}
