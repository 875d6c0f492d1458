import pytest

from folio.dependencies.section_dependencies import get_section_repository
from folio.main import app


class BrokenSectionRepository:
    def list_for_user(self, user_id):
        raise RuntimeError("database went away")


@pytest.fixture
def broken_sections():
    app.dependency_overrides[get_section_repository] = lambda: BrokenSectionRepository()
    yield
    app.dependency_overrides.pop(get_section_repository, None)


def test_unexpected_failure_returns_generic_500(client, register_user, broken_sections):
    headers = register_user()

    resp = client.get("/sections/list", headers=headers)

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Internal server error"}
    assert "database went away" not in resp.text
