"""Angle types and scalar math functions."""
