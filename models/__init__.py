"""
models/ - Domain Layer
======================
Immutable value objects shared by every layer: inbound events, outbound
actions, keyboard layouts and the fault taxonomy. No behavior lives here.
"""
