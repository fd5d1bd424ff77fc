"""
services/ - Business Logic Layer
=================================
Decides how each inbound event is answered. Services return outbound actions
and never talk to the platform themselves.
"""
