"""
MedConecta: coordinación de recursos hospitalarios y pacientes.
"""
__version__ = "1.0.0"
