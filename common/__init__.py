"""Shared logging, filesystem, configuration and reporting helpers."""
