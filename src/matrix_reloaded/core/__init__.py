"""
Core building blocks: result type, error taxonomy, configuration, numeric
predicates, addressing value objects and structural contracts.

Nothing here knows about matrix algorithms; linalg builds on top of it.
"""
