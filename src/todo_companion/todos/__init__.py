"""
Todo subsystem.

Components:
- todo_models.py: data structures (TodoItem, RemoteTodo, filter/sort/fetch enums)
- helpers.py: timestamps, title normalization, id derivation
- todo_client.py: remote listing client (httpx)
- todo_store.py: in-memory store + reducer operations
- todo_view.py: pure filtering/sorting/counting for display
- todo_api.py: small high-level helpers used by the rest of the app
"""
