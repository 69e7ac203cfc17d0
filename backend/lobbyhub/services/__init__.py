"""Lobby and game domain services.

Transport concerns stay in the socket handlers; everything here talks to
clients through a ``lobbyhub.transport.Transport``.
"""
