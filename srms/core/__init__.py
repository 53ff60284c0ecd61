"""Core Layer: pure domain logic, no IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions are pure and deterministic; clocks and files are passed in
"""
