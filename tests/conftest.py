import logging

import pytest
import structlog
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from admin_console.core.state import ApplicationState
from admin_console.domain.entities.user import AdminUser
from admin_console.domain.services.auth.password_policy import PasswordPolicyValidator
from admin_console.infrastructure.services.password_hasher import BcryptPasswordHasher
from tests.factories.user import OLD_PASSWORD, TEST_BCRYPT_ROUNDS


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging configured by a test so its stream does not outlive it."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    logging.getLogger().handlers.clear()


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def password_hasher():
    return BcryptPasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def password_policy():
    return PasswordPolicyValidator()


@pytest.fixture
def app_state():
    """A fresh area-code holder, independent from the process singleton."""
    return ApplicationState()


@pytest.fixture
def admin_user(db_session, password_hasher):
    """An existing admin user named ``admin``."""
    user = AdminUser(
        username="admin",
        email="admin@example.com",
        hashed_password=password_hasher.hash(OLD_PASSWORD),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
