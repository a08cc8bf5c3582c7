"""
taskboard: console to-do client for a backend-as-a-service.

Subpackages:
- core: models, ports, AppState and the board (state reconciliation)
- errors: request failure taxonomy shared by every layer
- transport: httpx-based REST and GraphQL clients
- api: request layer (tasks + session) for each transport
- storage: local storage slot for the session token
- cli / connectors: composition root, slash commands and the console REPL
"""
