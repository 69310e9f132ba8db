"""
Application package for the Items API.

The package is layered the usual way: ``api`` holds the HTTP endpoints,
``services`` the orchestration logic, ``repositories`` the storage
adapters, ``schemas`` the pydantic models and ``core`` configuration,
logging, errors and the port interfaces shared by all of them.
"""
