"""Bundled configuration and policy definitions for resourcemesh."""
