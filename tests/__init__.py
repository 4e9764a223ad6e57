"""Tests for the Smart Parking Lot"""
