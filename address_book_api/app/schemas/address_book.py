"""
Pydantic models for address book payloads.
"""

from pydantic import BaseModel, Field


class AddressBookCreate(BaseModel):
    """Schema for creating an address book."""

    name: str = Field(..., examples=["Personal"])


class AddressBookRead(BaseModel):
    """Schema for reading an address book summary."""

    name: str
    contact_count: int


class ContactCount(BaseModel):
    count: int
