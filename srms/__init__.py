"""Student Result Store: fixed-width binary record file with derived grades, analytics and reports.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
