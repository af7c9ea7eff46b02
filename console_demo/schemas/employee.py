"""
Console Demo API - Employee Schemas
====================================

What:  Pydantic models for the employee registry endpoints.
Why:   FastAPI deserializes request bodies into these models, rejecting
       anything that is not a JSON object with a 422 before a handler runs.

Employee records are opaque: no field is required or validated, and every
key the client sends is kept (extra="allow") and serialized back as-is.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """
    What:  A single employee record as submitted by the client.
    Who:   Request body of GET /employee and POST /employee.

    Example:
        {"name": "Alice", "department": "Engineering"}
    """

    model_config = ConfigDict(extra="allow")


class EmployeeListEnvelope(BaseModel):
    """
    What:  Response of GET /employee after appending a record.
    Why:   Clients get the full registry contents plus a status message.
    """

    data: List[Employee] = Field(description="Every employee record, in insertion order")
    message: str = Field(
        default="Employee added successfully",
        description="Human-readable status message",
    )
