"""Audit trail recording and replay."""
