"""Service Layer — async orchestration of the pure core around store calls.

Invariants:
    - Services receive their repository via constructor (never a module global)
    - Store calls are the only suspension points
"""
