"""Unit tests, one module per component"""
