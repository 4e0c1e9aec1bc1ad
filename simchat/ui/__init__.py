"""Toolkit-independent widgets plus the wxPython host adapter."""
