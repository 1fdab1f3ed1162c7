"""Conversion services: inference, structure building, assembly, rendering."""
