"""
Console Demo API - Application Package Initializer
===================================================

Two independent handler groups served by one FastAPI application:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← greeting.py, employees.py, health.py
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← greeting, employee registry, credentials
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic request/response models
    └─────────────────────────────────────┘

There is no persistence layer: employee records live in process memory
and disappear on restart.
"""

__version__ = "1.0.0"
