"""Domain layer - pure types and abstractions with zero external dependencies.

This layer contains:
- protocols: Interfaces the engine consumes (surfaces, resolvers, strategies)
- types: Candidates, rendered items and engine state
- events: Dropdown events and the event bus
- errors: Domain-specific exceptions

The domain layer has NO dependencies on application, infrastructure, or presentation layers.
All other layers depend on the domain layer.
"""
