"""Kernel – error hierarchy shared by every tierflags layer."""
