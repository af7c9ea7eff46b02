"""
Console Demo API - Services Layer
==================================

Service Inventory:
    - GreetingService: fixed greeting and body echo
    - EmployeeRegistry: lock-guarded, append-only employee collection
    - CredentialService: optional x-api-key check
"""
