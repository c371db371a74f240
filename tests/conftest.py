"""Pytest configuration and shared fixtures for the hotel booking tests."""

from datetime import date
from typing import Iterator, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hotel_booking.api import deps
from hotel_booking.config.settings import Settings
from hotel_booking.core.security import JWTManager, PasswordHasher
from hotel_booking.db.init_db import drop_db, init_db
from hotel_booking.integrations import StorageClient
from hotel_booking.main import create_app
from hotel_booking.models import Booking, Hotel, Room, User
from hotel_booking.models.base import BookingStatus

API = "/api/v1"


class CapturedMailer:
    """Mailer that records messages instead of sending them."""

    def __init__(self) -> None:
        self.sent: List[dict] = []

    def send(self, to: str, subject: str, body_text: str) -> None:
        self.sent.append({"to": to, "subject": subject, "body_text": body_text})


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage(tmp_path) -> StorageClient:
    config = Settings(UPLOAD_DIR=str(tmp_path / "uploads"), UPLOAD_URL_PREFIX="/uploads")
    return StorageClient(provider_name="local", config=config)


@pytest.fixture
def mailer() -> CapturedMailer:
    return CapturedMailer()


@pytest.fixture
def hasher() -> PasswordHasher:
    # Minimum cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens() -> JWTManager:
    return JWTManager(secret_key="test-secret", algorithm="HS256", expire_minutes=60)


@pytest.fixture
def app(session_factory, storage, mailer, hasher, tokens):
    app = create_app(create_schema=False)

    def override_get_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    app.dependency_overrides[deps.get_storage] = lambda: storage
    app.dependency_overrides[deps.get_mailer] = lambda: mailer
    app.dependency_overrides[deps.get_hasher] = lambda: hasher
    app.dependency_overrides[deps.get_tokens] = lambda: tokens
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


# --- Seed data -----------------------------------------------------------------

@pytest.fixture
def user(db_session: Session, hasher: PasswordHasher) -> User:
    user = User(
        name="Alice Nguyen",
        email="alice@example.com",
        password=hasher.hash("secret123"),
        number_phone="0912345678",
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def hotel(db_session: Session, user: User) -> Hotel:
    hotel = Hotel(
        name="Riverside Hotel",
        star=4,
        map="Hai Chau, Son Tra",
        type_hotel="hotel",
        payment="card",
        owner_id=user.id,
    )
    db_session.add(hotel)
    db_session.commit()
    return hotel


@pytest.fixture
def room(db_session: Session, hotel: Hotel) -> Room:
    """A room type with two units."""
    room = Room(name="Deluxe Double", price=120.0, quantity=2, quantity_people=2, hotel_id=hotel.id)
    db_session.add(room)
    db_session.commit()
    return room


def make_booking(
    db_session: Session,
    room: Room,
    user: User,
    check_in: date,
    check_out: date,
    quantity: int = 1,
    status: BookingStatus = BookingStatus.CONFIRMED,
) -> Booking:
    booking = Booking(
        room_id=room.id,
        user_id=user.id,
        hotel_id=room.hotel_id,
        check_in_date=check_in,
        check_out_date=check_out,
        quantity=quantity,
        total_price=100.0 * quantity,
        full_name=user.name,
        status=status,
    )
    db_session.add(booking)
    db_session.commit()
    return booking


def booking_payload(room: Room, user: User, check_in: str, check_out: str, quantity: int = 1) -> dict:
    return {
        "room_id": room.id,
        "user_id": user.id,
        "hotel_id": room.hotel_id,
        "check_in_date": check_in,
        "check_out_date": check_out,
        "quantity": quantity,
        "total_price": 240.0,
        "full_name": "Alice Nguyen",
    }


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
