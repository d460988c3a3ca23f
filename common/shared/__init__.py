"""Configuration, progress and reporting helpers built on common.base."""
