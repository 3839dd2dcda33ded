"""Domain layer - Pure business logic.

This layer contains the payment instruction entities, value objects,
validation rules and protocols. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (Account, DraftTransfer)
- value_objects/: Value objects (Money)
- enums/: Instruction type and transfer status
- errors/: Instruction error messages and syntax errors
- validators/: Field validators and the ordered rule registry
- protocols/: Ports implemented by infrastructure (LoggerProtocol)
"""
