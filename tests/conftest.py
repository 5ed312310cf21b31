import pytest

from db import get_session, init_db, table_for


@pytest.fixture
def db_url(tmp_path):
    """Fresh SQLite database with every shape table created."""
    url = f"sqlite:///{tmp_path / 'shapes.sqlite'}"
    init_db(url)
    return url


@pytest.fixture
def insert_rows(db_url):
    """Insert raw row dicts into a variant's table."""
    def _insert(variant, *rows):
        session = get_session()
        try:
            for row in rows:
                session.execute(table_for(variant).insert().values(**row))
            session.commit()
        finally:
            session.close()
    return _insert


@pytest.fixture
def app(tmp_path):
    from main import create_app
    app = create_app(f"sqlite:///{tmp_path / 'api.sqlite'}")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()
