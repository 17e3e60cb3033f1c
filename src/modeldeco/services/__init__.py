"""Service layer — command execution, validation and orchestration.

Services may import from the domain layer and from config models.
Every failure propagates as a DecorationError subclass.
"""
