"""Application layer - Use cases and orchestration.

Structure:
- commands/: ProcessPaymentInstruction command and its handler
- services/: Pipeline stages (validator chain, scheduler, executor,
  response assembler) and the plain-mapping entry point
- dtos/: Results passed between stages and returned to callers

The application layer sequences the stages; rules live in the domain layer.
"""
