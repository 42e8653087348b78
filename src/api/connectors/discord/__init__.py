"""Connector Discord — endpoint de interações (HTTP)."""
