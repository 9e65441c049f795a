"""Kernel – errors, tagged outcomes and clock ports shared by every layer."""
