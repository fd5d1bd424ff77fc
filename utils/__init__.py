"""
utils/ - Shared Helpers
=======================
Cross-cutting helpers used by every layer, such as logging setup.
"""
