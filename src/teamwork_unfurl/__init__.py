"""Teamwork task link unfurling for Slack."""
