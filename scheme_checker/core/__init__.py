"""scheme_checker.core — Foundation layer.

Contains the XML accessor, scheme parser, diff engine, palette helpers and
report builder. This package has NO dependencies on scheme_checker.__main__.
Only stdlib and lxml are allowed here.
"""
