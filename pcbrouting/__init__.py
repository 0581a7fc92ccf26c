"""Vectors, shapes, collision tests, pads, traces, render models and settings for PCB auto-routing."""

__version__ = "0.1.0"