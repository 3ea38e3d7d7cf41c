"""Utility helpers for uutik_report."""
