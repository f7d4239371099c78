"""Kernel – error hierarchy, result type and clock shared by every layer."""
