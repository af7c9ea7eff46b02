"""
Console Demo API - Employee Route Handlers
===========================================

What:  Append to and read the in-memory employee registry.

Route Inventory:
    GET  /employee    Append the body record, return every record + message
    POST /employee    Append the body record, return "Saved Successfully"
    GET  /employees   Return every record, no mutation

GET /employee takes a request body and mutates state. The method and
path are kept for existing clients; the handler is named for what it does.
"""

import logging
from typing import List

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from console_demo.schemas.common import SaveEnvelope
from console_demo.schemas.employee import Employee, EmployeeListEnvelope
from console_demo.services.employee_registry import employee_registry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])

ADDED_MESSAGE = "Employee added successfully"
SAVED_MESSAGE = "Saved Successfully"


@router.get(
    "/employee",
    response_model=EmployeeListEnvelope,
    summary="Append an employee and list all",
    description=(
        "Appends the employee in the request body to the registry and returns "
        "the full registry under `data`."
    ),
)
async def add_employee_and_list(employee: Employee) -> EmployeeListEnvelope:
    snapshot = employee_registry.append_and_snapshot(employee)
    return EmployeeListEnvelope(data=snapshot, message=ADDED_MESSAGE)


@router.post(
    "/employee",
    response_class=PlainTextResponse,
    summary="Append an employee",
)
async def post_employee(employee: Employee) -> str:
    """
    Append the record and confirm with a fixed string.

    The envelope built here is logged only; clients always receive
    "Saved Successfully".
    """
    employee_registry.append(employee)
    logger.info("Employee added: %s", employee.model_dump())

    envelope = SaveEnvelope(message=ADDED_MESSAGE)
    logger.info("Employee save envelope: %s", envelope.model_dump())

    return SAVED_MESSAGE


@router.get(
    "/employees",
    response_model=List[Employee],
    summary="List all employees",
)
async def list_employees() -> List[Employee]:
    return employee_registry.snapshot()
