"""
transport/ - Platform Access Layer
==================================
Everything that talks to the Telegram Bot API. The transport receives raw
updates, converts them into domain events, and performs outbound actions.
Platform errors are re-raised using the fault taxonomy in models/faults.py.
"""
