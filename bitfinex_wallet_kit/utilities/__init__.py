"""
Utility modules: constants and exceptions, converters, validators, formatters,
console output and client wiring.
"""
