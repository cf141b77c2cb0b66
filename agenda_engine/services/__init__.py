"""Scheduling services. All of them are pure over their inputs."""
