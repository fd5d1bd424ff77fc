"""
handlers/ - Presentation Layer
================================
Entry point for inbound Telegram events. The dispatcher classifies each
event, delegates to the appropriate Service, and sends the response back
through the transport. No business logic lives here.
"""
