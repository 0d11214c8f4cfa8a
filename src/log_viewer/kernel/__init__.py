"""Kernel – error hierarchy and JSON value model shared by every layer."""
