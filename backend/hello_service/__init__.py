"""hello-service: minimal welcome API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
