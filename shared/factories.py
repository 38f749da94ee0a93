"""Test data records and builders shared across the browser suites."""

from __future__ import annotations

import time
import uuid
from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from faker import Faker

DEFAULT_PASSWORD = "Test@123456"
DEFAULT_COUNTRY = "United States"
GENDERS = ("Mr.", "Mrs.")

fake = Faker()


def _require_non_empty(record: Any, names: tuple[str, ...]) -> None:
    """Raise ValueError naming every required field that is blank."""
    missing = [name for name in names if not str(getattr(record, name) or "").strip()]
    if missing:
        raise ValueError(
            f"{type(record).__name__} fields must be non-empty: {', '.join(missing)}"
        )


@dataclass(frozen=True)
class UserData:
    """Everything the signup and account forms ask for."""

    name: str
    email: str
    password: str
    first_name: str
    last_name: str
    company: str
    address: str
    country: str
    state: str
    city: str
    zipcode: str
    mobile_number: str
    address2: str | None = None
    gender: str = "Mr."
    birth_day: str = "15"
    birth_month: str = "6"
    birth_year: str = "1990"
    newsletter: bool = True
    special_offers: bool = True

    REQUIRED = (
        "name",
        "email",
        "password",
        "first_name",
        "last_name",
        "company",
        "address",
        "country",
        "state",
        "city",
        "zipcode",
        "mobile_number",
    )

    def __post_init__(self) -> None:
        _require_non_empty(self, self.REQUIRED)
        if self.gender not in GENDERS:
            raise ValueError(f"gender must be one of {GENDERS}, got {self.gender!r}")


@dataclass(frozen=True)
class ContactData:
    """Values typed into the contact form."""

    name: str
    email: str
    subject: str
    message: str

    def __post_init__(self) -> None:
        _require_non_empty(self, tuple(f.name for f in fields(self)))


@dataclass(frozen=True)
class ProductInfo:
    """Labelled strings scraped from a product detail view."""

    name: str
    category: str
    price: str
    availability: str
    condition: str
    brand: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def unique_stamp() -> str:
    """Millisecond timestamp plus a short random suffix, safe across workers."""
    return f"{int(time.time() * 1000)}{uuid.uuid4().hex[:4]}"


def build_user(prefix: str = "Test User", **overrides: Any) -> UserData:
    """
    Build a UserData with a unique name and email.

    Args:
        prefix: Display-name prefix; the email local part is derived from it.
        **overrides: Field values replacing the generated defaults.

    Returns:
        A fresh UserData instance.
    """
    stamp = unique_stamp()
    local_part = prefix.lower().replace(" ", "")
    user = UserData(
        name=f"{prefix} {stamp}",
        email=f"{local_part}{stamp}@example.com",
        password=DEFAULT_PASSWORD,
        first_name="John",
        last_name="Doe",
        company=fake.company(),
        address=fake.street_address(),
        address2=fake.secondary_address(),
        country=DEFAULT_COUNTRY,
        state=fake.state(),
        city=fake.city(),
        zipcode=fake.zipcode(),
        mobile_number=fake.numerify("##########"),
    )
    return replace(user, **overrides) if overrides else user


def build_contact(**overrides: Any) -> ContactData:
    """Build ContactData with a unique sender name and email."""
    stamp = unique_stamp()
    contact = ContactData(
        name=f"Test User {stamp}",
        email=f"testuser{stamp}@example.com",
        subject="Test Inquiry",
        message=fake.paragraph(nb_sentences=3),
    )
    return replace(contact, **overrides) if overrides else contact
