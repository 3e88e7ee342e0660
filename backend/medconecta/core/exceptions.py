"""
Excepciones personalizadas del sistema.
Proporciona excepciones semánticas para mejor manejo de errores.
"""


class BaseAppException(Exception):
    """
    Excepción base de la aplicación.
    Todas las excepciones personalizadas heredan de esta.
    """
    def __init__(self, message: str, code: str = "ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# ERRORES DE VALIDACIÓN
# ============================================

class ValidationError(BaseAppException):
    """Error de validación de datos."""
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")


class ReferenciaInvalidaError(BaseAppException):
    """El registro apunta a una entidad relacionada que no existe."""
    def __init__(self, message: str):
        super().__init__(message, "INVALID_REFERENCE")


class ConflictoError(BaseAppException):
    """El registro ya existe y no puede crearse de nuevo."""
    def __init__(self, message: str):
        super().__init__(message, "CONFLICT")


# ============================================
# ERRORES DE NO ENCONTRADO
# ============================================

class NotFoundError(BaseAppException):
    """Recurso no encontrado."""
    def __init__(self, resource: str, identifier):
        super().__init__(
            f"{resource} con identificador '{identifier}' no encontrado",
            "NOT_FOUND"
        )
        self.resource = resource
        self.identifier = identifier


class HospitalNotFoundError(NotFoundError):
    """Hospital no encontrado."""
    def __init__(self, hospital_id: int):
        super().__init__("Hospital", hospital_id)


class PacienteNotFoundError(NotFoundError):
    """Paciente no encontrado."""
    def __init__(self, paciente_id: int):
        super().__init__("Paciente", paciente_id)


class DoctorNotFoundError(NotFoundError):
    """Doctor no encontrado (o no pertenece al hospital indicado)."""
    def __init__(self, doctor_id: int):
        super().__init__("Doctor", doctor_id)


class RecursoNotFoundError(NotFoundError):
    """El hospital todavía no tiene registro para ese tipo de recurso."""
    def __init__(self, tipo: str, hospital_id: int):
        super().__init__(f"Registro de {tipo}", hospital_id)
        self.tipo = tipo


class PerfilMedicoNotFoundError(NotFoundError):
    """Perfil médico no encontrado."""
    def __init__(self, paciente_id: int):
        super().__init__("Perfil médico", paciente_id)


class SolicitudNotFoundError(NotFoundError):
    """Solicitud de la comunidad no encontrada."""
    def __init__(self, solicitud_id: str):
        super().__init__("Solicitud", solicitud_id)


# ============================================
# ERRORES DE AUTENTICACIÓN
# ============================================

class CredencialesInvalidasError(BaseAppException):
    """Credenciales incorrectas en el login."""
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, "INVALID_CREDENTIALS")


# ============================================
# ERRORES DE SERVICIOS EXTERNOS
# ============================================

class ServicioExternoError(BaseAppException):
    """Un servicio externo falló o no respondió."""
    def __init__(self, servicio: str, message: str):
        super().__init__(f"{servicio}: {message}", "UPSTREAM_ERROR")
        self.servicio = servicio


class ServicioNoConfiguradoError(ServicioExternoError):
    """El servicio externo no está configurado."""
    def __init__(self, servicio: str):
        super().__init__(servicio, "service not configured")
