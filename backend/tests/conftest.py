"""
Fixtures partagées pour tous les tests.
"""
import os
import shutil
import tempfile
from io import BytesIO

# Configuration lue à l'import de tourcms.config : à définir avant tout import de l'application
UPLOAD_ROOT = tempfile.mkdtemp(prefix="tourcms-uploads-")
os.environ["UPLOAD_ROOT"] = UPLOAD_ROOT
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PUBLIC_BASE_URL"] = ""
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tourcms.models.db import Base
from tourcms.services.storage import LocalStorage, Storage, get_storage
from tourcms.db import get_db
from main import app

# Base de données de test en mémoire SQLite
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class MemoryStorage(Storage):
    """Stockage en mémoire ; ``fail_deletes`` simule un disque qui refuse les suppressions."""

    def __init__(self):
        self.files = {}
        self.deleted = []
        self.fail_deletes = False

    def put(self, key, data):
        self.files[key] = data
        return key

    def delete(self, key):
        if self.fail_deletes:
            raise PermissionError(f"read-only: {key}")
        self.deleted.append(key)
        return self.files.pop(key, None) is not None

    def exists(self, key):
        return key in self.files


@pytest.fixture(scope="function")
def db():
    """
    Crée une nouvelle base de données pour chaque test.
    La base est créée au début et supprimée à la fin pour garantir l'isolation.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def upload_root():
    """Dossier d'uploads servi sous /uploads, vidé avant chaque test."""
    shutil.rmtree(UPLOAD_ROOT, ignore_errors=True)
    os.makedirs(UPLOAD_ROOT, exist_ok=True)
    return UPLOAD_ROOT


@pytest.fixture(scope="function")
def storage(upload_root):
    return LocalStorage(upload_root)


def _make_client(db, storage):
    def override_get_db():
        # La session est fermée par la fixture db
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    return TestClient(app)


@pytest.fixture(scope="function")
def client(db, storage):
    """
    Client de test FastAPI : base isolée et stockage disque dans le dossier temporaire.
    """
    with _make_client(db, storage) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def memory_storage():
    return MemoryStorage()


@pytest.fixture(scope="function")
def memory_client(db, memory_storage):
    """Client de test dont le stockage est le faux stockage en mémoire."""
    with _make_client(db, memory_storage) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_image():
    """Fabrique des octets d'image valides avec Pillow."""
    def _make(fmt="PNG", size=(8, 8), color=(200, 30, 30)):
        buf = BytesIO()
        Image.new("RGB", size, color).save(buf, format=fmt)
        return buf.getvalue()
    return _make


@pytest.fixture
def territory_tree(client):
    """Territoire -> district -> sous-district -> village, créés via l'API."""
    territory = client.post("/api/territories", json={"title": "Ladakh", "capital": "Leh"}).json()
    district = client.post(
        "/api/territory-districts", json={"territory_id": territory["id"], "name": "Leh"}
    ).json()
    subdistrict = client.post(
        "/api/territory-subdistricts", json={"territory_district_id": district["id"], "title": "Nubra"}
    ).json()
    village = client.post(
        "/api/territory-villages", json={"territory_subdistrict_id": subdistrict["id"], "name": "Hunder"}
    ).json()
    return {"territory": territory, "district": district, "subdistrict": subdistrict, "village": village}


@pytest.fixture
def state_tree(client):
    """État -> district -> sous-district -> village."""
    state = client.post("/api/states", json={"name": "Uttarakhand", "capital": "Dehradun"}).json()
    district = client.post("/api/districts", json={"state_id": state["id"], "name": "Chamoli"}).json()
    subdistrict = client.post(
        "/api/subdistricts", json={"district_id": district["id"], "title": "Joshimath"}
    ).json()
    village = client.post(
        "/api/villages", json={"subdistrict_id": subdistrict["id"], "name": "Mana"}
    ).json()
    return {"state": state, "district": district, "subdistrict": subdistrict, "village": village}
