"""Graph values and helpers.

This package holds the plain-mapping graph types (`types`), schema
validation (`validate`) and NetworkX interoperability (`convert`).
"""
