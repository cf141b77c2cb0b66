"""Pydantic models for events, tasks and plans."""
