"""Vitrine command-line interface."""
