"""Shared test fixtures."""

import os
import tempfile
from datetime import date

os.environ.setdefault(
    "BUCKAROO_AUDIT_DATABASE_URL",
    f"sqlite+aiosqlite:///{os.path.join(tempfile.gettempdir(), 'buckaroo_gateway_test.db')}",
)

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from buckaroo_gateway.authentication import Authentication
from buckaroo_gateway.models.audit import Base
from buckaroo_gateway.models.enums import CustomerCategory, CustomerLanguage, CustomerSalutation
from buckaroo_gateway.services.pay.afterpay import Afterpay


@pytest_asyncio.fixture
async def db_session():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def authentication():
    return Authentication(website_key="WEBSITEKEY", secret_key="s3cr3t")


BILLING = dict(
    category=CustomerCategory.PERSON,
    salutation=CustomerSalutation.MR,
    first_name="Jordi",
    last_name="Jolink",
    birth_date=date(1970, 6, 15),
    street="Teststraat",
    street_number=1,
    postal_code="1234AA",
    city="Amsterdam",
    country="NL",
    mobile_phone="0612345678",
    email="jordi@example.com",
    conversation_language=CustomerLanguage.NL,
)

SHIPPING = dict(
    category=CustomerCategory.PERSON,
    first_name="Jordi",
    last_name="Jolink",
    street="Hoofdstraat",
    street_number=124,
    street_number_additional="a",
    postal_code="5678XX",
    city="Den Haag",
    conversation_language=CustomerLanguage.NL,
)


@pytest.fixture
def billing_fields():
    return dict(BILLING)


@pytest.fixture
def shipping_fields():
    return dict(SHIPPING)


@pytest.fixture
def afterpay():
    """Afterpay service with a complete billing customer and one article."""
    return (
        Afterpay()
        .set_merchant_image_url("https://example.com/logo.png")
        .set_billing_customer(**BILLING)
        .add_article("ABC-001", "Test product", 2, 20.0, 21.0)
    )
