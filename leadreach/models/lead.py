"""Lead model supplying values for auto placeholders."""

from sqlalchemy import Column, String
from leadreach.models.base import BaseModel


class Lead(BaseModel):
    """
    Lead record used to fill auto placeholders when a template is sent.

    Attributes:
        person_firstname: Contact first name
        person_lastname: Contact last name
        company_name: Company name
        company_industry: Company industry
        locality: Town or city of the company
        email: Contact email address (delivery only, never a placeholder)
    """

    __tablename__ = "leads"

    person_firstname = Column(String(100), nullable=True)
    person_lastname = Column(String(100), nullable=True)
    company_name = Column(String(255), nullable=True)
    company_industry = Column(String(255), nullable=True)
    locality = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)

    def __repr__(self):
        """String representation of Lead."""
        return f"<Lead(id={self.id}, company='{self.company_name}')>"
