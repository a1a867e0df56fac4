"""Packaged reference catalogs."""
