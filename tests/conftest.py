import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.models import Task, User
from app.utils.security import hash_password
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(full_name="Alice Manager", email="alice@example.com", role="Manager", password="secret123"):
        user = User(full_name=full_name, email=email, hashed_password=hash_password(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_task(db):
    def _make_task(creator, assignee, title="Write report", status="Pending"):
        task = Task(
            title=title,
            description="Quarterly numbers",
            created_by=creator.id,
            assigned_to=assignee.id,
            status=status,
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return _make_task


def register(client, full_name, email, role, password="secret123"):
    response = client.post(
        "/api/auth/register",
        json={"full_name": full_name, "email": email, "password": password, "role": role},
    )
    assert response.status_code == 200, response.json()
    data = response.json()["data"]
    return data["user_id"], {"Authorization": f"Bearer {data['token']}"}
