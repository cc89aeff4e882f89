"""Minimal persistent task list with a console front end."""
