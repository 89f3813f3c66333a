"""Pytest configuration and fixtures."""

import os

# Keep test runs from writing a log file into the working directory
os.environ.setdefault("LOG_FILE", "")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from leadreach.database import Base
from leadreach.models import EmailTemplate, Lead
from leadreach.schemas import CustomPlaceholder, EmailTemplateCreate, ManualFields
from leadreach.services import EmailTemplateService


@pytest.fixture(scope="function")
def test_engine():
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def test_session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def test_db(test_session_factory):
    """Create a test database session."""
    session = test_session_factory()
    yield session
    session.close()


@pytest.fixture
def template_service():
    return EmailTemplateService()


@pytest.fixture
def sample_template(test_db, template_service):
    """Create a template in the current shape."""
    return template_service.create_template(
        test_db,
        EmailTemplateCreate(
            name="Erstkontakt",
            subject="Anfrage für {{firma_name}}",
            body_template="Hallo {{person_vorname}}, ich bin {{absender_name}}",
            manual_fields=ManualFields(
                custom_placeholders=[CustomPlaceholder(name="absender_name", value="Tom")]
            ),
        ),
    )


@pytest.fixture
def legacy_template(test_db):
    """Insert a row written by the fixed-field editor, bypassing the service."""
    row = EmailTemplate(
        name="Alte Vorlage",
        subject=None,
        body_template="Grüsse {{absender_vorname}} {{absender_name}}",
        manual_fields={
            "absender_vorname": "Max",
            "absender_name": "Müller",
            "absender_telefon": "",
            "absender_email": "max@beispiel.ch",
            "weitere_eigene": "",
        },
    )
    test_db.add(row)
    test_db.commit()
    return row


@pytest.fixture
def sample_lead(test_db):
    """Create a sample lead."""
    lead = Lead(
        person_firstname="Anna",
        person_lastname="Meier",
        company_name="Muster AG",
        company_industry="Maschinenbau",
        locality="Zürich",
        email="anna@muster.ch",
    )
    test_db.add(lead)
    test_db.commit()
    return lead
