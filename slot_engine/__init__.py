"""Slot machine game engine"""
__version__ = "1.0.0"
