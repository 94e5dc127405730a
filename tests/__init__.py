"""
Test package for the Bitfinex wallet kit.

Layout:
- unit: isolated tests for converters, decoder, request builder, service, CLI
- integration: service wired to the real signing factory and executor
- property: Hypothesis tests for decoder and amount invariants
- fixtures: raw Bitfinex payloads
- mocks: recording collaborators
"""
