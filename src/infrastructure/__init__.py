"""Infrastructure layer - Adapters.

Structure:
- parsers/: Instruction text parser
- logging/: structlog-backed implementation of LoggerProtocol

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
