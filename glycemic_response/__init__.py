"""Glucose-meal response analytics API."""
