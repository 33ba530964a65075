"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from crudgate.config import CrudConfig
from crudgate.interfaces.api.app import create_app
from crudgate.interfaces.api.dispatcher import add_crud_handlers

ONE_SLUG = "/v1/items/{item_id}"
ALL_SLUG = "/v1/items"


@pytest.fixture
def build_client(crud, crud_config):
    """Build a TestClient with one CRUD registration over ``crud``."""

    def _build(
        permissions,
        auth_handler,
        error_handler=None,
        config: CrudConfig | None = None,
        all_slug: str | None = ALL_SLUG,
    ) -> TestClient:
        config = config or crud_config
        app = create_app(config)
        add_crud_handlers(
            app,
            ONE_SLUG,
            all_slug,
            permissions,
            crud,
            auth_handler,
            error_handler=error_handler,
            config=config,
        )
        return TestClient(app)

    return _build
