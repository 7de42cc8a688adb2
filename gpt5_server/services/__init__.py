# GPT-5 Server Services
"""Upstream clients, request translation and the tool catalogue."""
